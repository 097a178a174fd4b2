"""Tests for glyphfit.core.fonts — single-initialization cache and font providers."""

import subprocess
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from glyphfit.core import fonts
from glyphfit.core.config import Settings
from glyphfit.core.fonts import FontCache, default_font_cache, system_monospace_font


class CountingProvider:
    def __init__(self, value: bytes | None, delay: float = 0.0):
        self.value = value
        self.delay = delay
        self.calls = 0
        self._lock = threading.Lock()

    def __call__(self) -> bytes | None:
        with self._lock:
            self.calls += 1
        time.sleep(self.delay)
        return self.value


class TestFontCache:
    def test_loads_once(self):
        provider = CountingProvider(b'font-bytes')
        cache = FontCache(provider)
        assert cache.get() == b'font-bytes'
        assert cache.get() == b'font-bytes'
        assert provider.calls == 1

    def test_same_object_every_time(self):
        cache = FontCache(CountingProvider(bytes(range(10))))
        assert cache.get() is cache.get()

    def test_absence_is_permanent(self):
        provider = CountingProvider(None)
        cache = FontCache(provider)
        assert cache.get() is None
        assert cache.get() is None
        assert provider.calls == 1
        assert cache.settled

    def test_not_settled_before_first_get(self):
        provider = CountingProvider(b'x')
        cache = FontCache(provider)
        assert not cache.settled
        assert provider.calls == 0

    def test_provider_oserror_is_absence(self):
        calls = []

        def broken() -> bytes | None:
            calls.append(1)
            raise OSError('disk gone')

        cache = FontCache(broken)
        assert cache.get() is None
        assert cache.get() is None
        assert len(calls) == 1

    def test_concurrent_first_callers(self):
        provider = CountingProvider(b'shared', delay=0.05)
        cache = FontCache(provider)
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda _i: cache.get(), range(64)))
        assert provider.calls == 1
        assert all(r is results[0] for r in results)
        assert results[0] == b'shared'

    def test_from_settings_uses_font_path(self, tmp_path: Path, font_bytes: bytes):
        path = tmp_path / 'test.ttf'
        path.write_bytes(font_bytes)
        cache = FontCache.from_settings(Settings(font_path=str(path)))
        assert cache.get() == font_bytes


class TestSystemMonospaceFont:
    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / 'mono.ttf'
        path.write_bytes(b'\x00\x01\x00\x00fake')
        assert system_monospace_font(path=str(path)) == b'\x00\x01\x00\x00fake'

    def test_missing_path(self, tmp_path: Path):
        assert system_monospace_font(path=str(tmp_path / 'nope.ttf')) is None

    def test_fc_match_not_installed(self, monkeypatch: pytest.MonkeyPatch):
        def missing(*args, **kwargs):
            raise FileNotFoundError('fc-match')

        monkeypatch.setattr(subprocess, 'run', missing)
        assert system_monospace_font() is None

    def test_fc_match_timeout(self, monkeypatch: pytest.MonkeyPatch):
        def slow(*args, **kwargs):
            raise subprocess.TimeoutExpired(cmd='fc-match', timeout=5)

        monkeypatch.setattr(subprocess, 'run', slow)
        assert system_monospace_font() is None

    def test_fc_match_result_is_read(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        path = tmp_path / 'DejaVuSansMono.ttf'
        path.write_bytes(b'mono')
        seen = []

        def fake_run(cmd, **kwargs):
            seen.append(cmd)
            return subprocess.CompletedProcess(cmd, 0, stdout=str(path), stderr='')

        monkeypatch.setattr(subprocess, 'run', fake_run)
        assert system_monospace_font('monospace') == b'mono'
        assert seen[0][0] == 'fc-match'
        assert seen[0][-1] == 'monospace'

    def test_fc_match_failure(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(
            subprocess,
            'run',
            lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 1, stdout='', stderr='no match'),
        )
        assert system_monospace_font() is None

    def test_fc_match_points_at_missing_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        missing = tmp_path / 'gone.ttf'
        monkeypatch.setattr(
            subprocess,
            'run',
            lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 0, stdout=str(missing), stderr=''),
        )
        assert system_monospace_font() is None


class TestDefaultFontCache:
    def test_created_once_from_env(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path, font_bytes: bytes):
        path = tmp_path / 'env.ttf'
        path.write_bytes(font_bytes)
        monkeypatch.setenv('GLYPHFIT_FONT', str(path))
        monkeypatch.setattr(fonts, '_default_cache', None)
        cache = default_font_cache()
        assert default_font_cache() is cache
        assert cache.get() == font_bytes
