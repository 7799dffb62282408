import pytest

from nhats import cli


def test_runs_samples(monkeypatch, capsys):
    monkeypatch.setattr(cli, 'SAMPLES', [('paper-2', 2), ('alternate-3', 3), ('generated', 4)])
    assert cli.main([]) == 0
    assert capsys.readouterr().out == "True\nTrue\nTrue\n"


def test_single_strategy(capsys):
    assert cli.main(['--strategy', 'generated', '--n', '3']) == 0
    assert capsys.readouterr().out == "True\n"


def test_losing_strategy_prints_row(capsys):
    assert cli.main(['-s', 'constant', '-n', '2']) == 1
    assert capsys.readouterr().out == "1 1 | 0 0\nFalse\n"


def test_summary(capsys):
    assert cli.main(['-s', 'constant', '-n', '2', '--summary']) == 1
    out = capsys.readouterr().out
    assert "SUMMARY" in out
    assert "❌ constant: n=2, 4 assignments" in out
    assert "1 of 1 strategies can lose" in out


def test_list(capsys):
    assert cli.main(['--list']) == 0
    out = capsys.readouterr().out
    assert "generated" in out
    assert "paper-2" in out


@pytest.mark.parametrize('argv', [
    ['--strategy', 'generated'],
    ['--n', '3'],
    ['-s', 'paper-2', '-n', '3'],
    ['-s', 'generated', '-n', '0'],
    ['-s', 'psychic', '-n', '3'],
])
def test_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2
