from shell_ai import auth


def test_read_user_key_present():
    assert auth.read_user_key({"SHELL_AI_KEY": "abc"}) == "abc"


def test_read_user_key_missing():
    assert auth.read_user_key({}) is None


def test_read_user_key_empty_counts_as_set():
    assert auth.read_user_key({"SHELL_AI_KEY": ""}) == ""


def test_read_user_key_defaults_to_process_env(monkeypatch):
    monkeypatch.setenv("SHELL_AI_KEY", "from-env")
    assert auth.read_user_key() == "from-env"


def test_onboarding_mentions_key_and_install_steps():
    text = auth.onboarding_text("/tmp/shell-ai")
    assert "SHELL_AI_KEY" in text
    assert 'export SHELL_AI_KEY="[insert key here]"' in text
    assert "mv /tmp/shell-ai ~/CustomBin/bin/q" in text
    assert "export PATH=$PATH:~/CustomBin/bin" in text
