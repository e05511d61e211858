from cwd_exec.shells import POSIX_SHELL, WINDOWS_SHELL, select_shell


def test_windows_uses_cmd():
    shell = select_shell("Windows")
    assert shell is WINDOWS_SHELL
    assert shell.argv("dir /b") == ["cmd", "/C", "dir /b"]


def test_other_systems_use_sh():
    for system in ("Linux", "Darwin", "FreeBSD", ""):
        assert select_shell(system) is POSIX_SHELL
    assert POSIX_SHELL.argv("ls | wc -l") == ["sh", "-c", "ls | wc -l"]


def test_defaults_to_host_platform(monkeypatch):
    monkeypatch.setattr("cwd_exec.shells.platform.system", lambda: "windows")
    assert select_shell() is WINDOWS_SHELL
    monkeypatch.setattr("cwd_exec.shells.platform.system", lambda: "Linux")
    assert select_shell() is POSIX_SHELL
