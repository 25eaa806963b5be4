from psinfo.cli import main

MISSING_PID = "99999999"


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Uso: psinfo [ -l pid1 pid2 ... ] [ -r ]" in out


def test_invalid_pid_fails(capsys):
    assert main(["abc"]) == 1
    assert "PID 'abc' no es válido. Debe ser numérico." in capsys.readouterr().out


def test_missing_process_is_listed(capsys):
    assert main([MISSING_PID]) == 0
    out = capsys.readouterr().out
    assert out.startswith("\nINFORMACIÓN DE LOS PROCESOS: \n")
    assert f"El proceso con pid {MISSING_PID} no existe o fue terminado" in out


def test_report_is_written(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["-l", MISSING_PID, "-r"]) == 0
    report = tmp_path / f"psinfo-report-{MISSING_PID}.info"
    assert report.exists()
    content = report.read_text(encoding="utf-8")
    assert "no existe o fue terminado" in content
    assert content in capsys.readouterr().out


def test_no_report_without_flag(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["-l", MISSING_PID]) == 0
    assert list(tmp_path.iterdir()) == []


def test_error_writes_no_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["-l", MISSING_PID, "-r", "1"]) == 1
    assert list(tmp_path.iterdir()) == []