from click.testing import CliRunner


def test_version_attribute() -> None:
    import passwdqc

    assert isinstance(passwdqc.__version__, str)
    assert passwdqc.__version__


def test_cli_reports_version() -> None:
    from passwdqc import __version__
    from passwdqc.cli import cli

    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "passwdqc" in result.output
    assert __version__ in result.output
