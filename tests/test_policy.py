import importlib

import pytest

from secret_recovery import InvalidInstance
from secret_recovery.policy import load_policy


def test_load_policy_reads_environment(monkeypatch):
    monkeypatch.setenv("SECRET_RECOVERY_MAX_DIGITS", "64")
    monkeypatch.setenv("SECRET_RECOVERY_MAX_SHARES", "16")
    monkeypatch.setenv("SECRET_RECOVERY_MAX_DOC_BYTES", "2048")
    monkeypatch.setenv("SECRET_RECOVERY_LOG_LEVEL", "debug")

    policy = load_policy()
    assert (policy.max_digits, policy.max_shares, policy.max_document_bytes) == (64, 16, 2048)
    assert policy.log_level == "DEBUG"


def test_load_policy_ignores_garbage(monkeypatch):
    monkeypatch.setenv("SECRET_RECOVERY_MAX_DIGITS", "lots")
    monkeypatch.setenv("SECRET_RECOVERY_LOG_LEVEL", "chatty")

    policy = load_policy()
    assert policy.max_digits == 4096
    assert policy.log_level == "WARNING"


def test_reloaded_policy_feeds_loader_limits(monkeypatch):
    import secret_recovery.loader as loader
    import secret_recovery.policy as policy_module

    monkeypatch.setenv("SECRET_RECOVERY_MAX_DIGITS", "2")
    importlib.reload(policy_module)
    try:
        with pytest.raises(InvalidInstance):
            loader.parse_instance({"keys": {"n": 1, "k": 1}, "1": {"base": "10", "value": "123"}})
    finally:
        monkeypatch.delenv("SECRET_RECOVERY_MAX_DIGITS")
        importlib.reload(policy_module)
