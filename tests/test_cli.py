import json

from simple_ga.__main__ import main


def test_default_run_prints_best_individual(capsys):
    assert main(['--seed', '1', '--serial']) == 0
    out = capsys.readouterr().out
    best = json.loads(out.strip().splitlines()[-1])
    assert len(best['genome']) == 16
    assert best['fitness'] == sum(best['genome'])


def test_named_fitness_function(capsys):
    assert main(['leading-ones', '--seed', '2']) == 0
    best = json.loads(capsys.readouterr().out.strip())
    assert 0 <= best['fitness'] <= 16


def test_unknown_fitness_function_does_not_run(capsys, monkeypatch):
    import simple_ga.__main__ as cli

    def no_evolve(*args, **kwargs):
        raise AssertionError("evolution must not start")

    monkeypatch.setattr(cli, 'evolve', no_evolve)
    assert main(['max-twos']) == 1
    captured = capsys.readouterr()
    assert 'unknown fitness function: max-twos' in captured.err
    assert captured.out == ''


def test_too_many_arguments_prints_usage(capsys, monkeypatch):
    import simple_ga.__main__ as cli

    def no_evolve(*args, **kwargs):
        raise AssertionError("evolution must not start")

    monkeypatch.setattr(cli, 'evolve', no_evolve)
    assert main(['max-ones', 'leading-ones']) == 2
    assert 'usage:' in capsys.readouterr().out


def test_default_run_logs_generation_progress(capsys, caplog):
    assert main(['--seed', '3', '--serial']) == 0
    assert 'Generation 1' in caplog.text
    assert 'Generation 50' in caplog.text
    # stdout stays machine-readable
    json.loads(capsys.readouterr().out.strip())


def test_quiet_run_hides_progress(capsys, caplog):
    assert main(['--seed', '3', '--serial', '--quiet']) == 0
    assert 'Generation 1' not in caplog.text
    json.loads(capsys.readouterr().out.strip())
