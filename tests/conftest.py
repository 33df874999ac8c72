import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Runner for invoking the `md-pwrap` command in-process."""
    return CliRunner()
