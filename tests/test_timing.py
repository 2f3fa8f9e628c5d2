from shell_ai import timing


def test_status_silent_without_debug(capsys):
    timing.status("hidden")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_status_prefixed_on_stderr(capsys):
    timing.DEBUG_TIMING = True
    timing.status("hello")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("shell-ai [")
    assert captured.err.rstrip().endswith("hello")


def test_step_reports_start_and_finish(capsys):
    timing.DEBUG_TIMING = True
    with timing.step("POST x"):
        pass
    lines = capsys.readouterr().err.splitlines()
    assert len(lines) == 2
    assert "POST x …" in lines[0]
    assert "POST x ✓" in lines[1]
