from diranalyzer import limits


class FakeProcess:
    def __init__(self, hard, fail=False):
        self.hard = hard
        self.fail = fail
        self.set_to = None

    def rlimit(self, res, new=None):
        if new is None:
            return (1024, self.hard)
        if self.fail:
            raise ValueError("not allowed")
        self.set_to = new


def _patch(monkeypatch, proc):
    monkeypatch.setattr(limits.psutil, "RLIMIT_NOFILE", 7, raising=False)
    monkeypatch.setattr(limits.psutil, "RLIM_INFINITY", -1, raising=False)
    monkeypatch.setattr(limits.psutil, "Process", lambda: proc)


def test_sets_soft_and_hard(monkeypatch):
    proc = FakeProcess(hard=4096)
    _patch(monkeypatch, proc)
    assert limits.limit_open_files(256)
    assert proc.set_to == (256, 256)


def test_never_exceeds_hard_limit(monkeypatch):
    proc = FakeProcess(hard=100)
    _patch(monkeypatch, proc)
    assert limits.limit_open_files(256)
    assert proc.set_to == (100, 100)


def test_unlimited_hard_limit(monkeypatch):
    proc = FakeProcess(hard=-1)
    _patch(monkeypatch, proc)
    assert limits.limit_open_files()
    assert proc.set_to == (limits.DEFAULT_MAX_OPEN_FILES, limits.DEFAULT_MAX_OPEN_FILES)


def test_failure_is_reported_not_raised(monkeypatch, caplog):
    _patch(monkeypatch, FakeProcess(hard=4096, fail=True))
    assert not limits.limit_open_files(256)
    assert "could not set open file limit" in caplog.text


def test_unsupported_platform(monkeypatch):
    monkeypatch.delattr(limits.psutil, "RLIMIT_NOFILE", raising=False)
    assert not limits.limit_open_files(256)
