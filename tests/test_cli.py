"""
Tests for run_convert — the ``tokenunit`` command line.
"""

import textwrap

import pytest

import run_convert


@pytest.fixture(autouse=True)
def _isolate(monkeypatch, restore_root_logger):
    for key in ("TOKENUNIT_NATIVE_DECIMALS", "TOKENUNIT_DISPLAY_PRECISION",
                "TOKENUNIT_CURRENCY", "TOKENUNIT_LOG_LEVEL", "TOKENUNIT_LOG_FMT",
                "TOKENUNIT_LOG_FILE"):
        monkeypatch.delenv(key, raising=False)


def _run(capsys, *argv):
    rc = run_convert.main(list(argv))
    out, err = capsys.readouterr()
    return rc, out.strip(), err


class TestCommands:

    def test_from_minimal(self, capsys):
        assert _run(capsys, "from-minimal", "1234567890000000000", "18")[:2] == (0, "1.23456789")

    def test_from_minimal_hex(self, capsys):
        assert _run(capsys, "from-minimal", "0xde0b6b3a7640000", "18")[:2] == (0, "1")

    def test_to_minimal(self, capsys):
        assert _run(capsys, "to-minimal", "1.5", "18")[:2] == (0, "1500000000000000000")

    def test_to_minimal_negative(self, capsys):
        assert _run(capsys, "to-minimal", "-1.5", "2")[:2] == (0, "-150")

    def test_to_minimal_hex(self, capsys):
        assert _run(capsys, "to-minimal", "1", "4", "--hex")[:2] == (0, "0x2710")

    def test_render(self, capsys):
        assert _run(capsys, "render", "1234567890000000000", "18")[:2] == (0, "1.23457")

    def test_render_show(self, capsys):
        assert _run(capsys, "render", "1234567890000000000", "18", "--show", "2")[:2] == (0, "1.23")

    def test_wei_to_fiat(self, capsys):
        assert _run(capsys, "wei-to-fiat", "1000000000000000000", "300", "USD")[:2] == (0, "300.0 USD")

    def test_wei_to_fiat_default_currency(self, capsys):
        assert _run(capsys, "wei-to-fiat", "1000000000000000000", "2")[:2] == (0, "2.0 usd")

    def test_balance_to_fiat(self, capsys):
        assert _run(capsys, "balance-to-fiat", "10", "300", "0.01", "usd")[:2] == (0, "30.0 USD")

    def test_balance_to_fiat_unavailable(self, capsys):
        assert _run(capsys, "balance-to-fiat", "none", "300", "0.01", "usd")[:2] == (1, "unavailable")

    def test_is_decimal(self, capsys):
        assert _run(capsys, "is-decimal", ".5")[:2] == (0, "true")

    def test_is_not_decimal(self, capsys):
        assert _run(capsys, "is-decimal", "1.")[:2] == (1, "false")

    def test_is_decimal_false_exit_code(self, capsys):
        assert _run(capsys, "is-decimal", "-1")[0] == run_convert.EXIT_FALSE


class TestErrors:

    def test_too_many_decimal_places(self, capsys):
        rc, out, err = _run(capsys, "to-minimal", "1.23", "1")
        assert rc == 2
        assert out == ""
        assert "too many decimal places" in err

    def test_bad_amount(self, capsys):
        rc, _, err = _run(capsys, "from-minimal", "1.5", "18")
        assert rc == 2
        assert "decimals are not supported" in err

    def test_bad_wei(self, capsys):
        assert _run(capsys, "wei-to-fiat", "abc", "300")[0] == 2


class TestConfig:

    def test_config_file(self, capsys, tmp_path):
        cfg = tmp_path / "tokenunit.toml"
        cfg.write_text(textwrap.dedent("""
            [conversion]
            display_precision = 3
            currency_code = "eur"
        """))
        assert _run(capsys, "--config", str(cfg), "render", "1234567890000000000", "18")[:2] == (0, "1.235")
        assert _run(capsys, "--config", str(cfg), "wei-to-fiat", "1000000000000000000", "2")[:2] == (0, "2.0 eur")

    def test_env_native_decimals(self, capsys, monkeypatch):
        monkeypatch.setenv("TOKENUNIT_NATIVE_DECIMALS", "8")
        assert _run(capsys, "wei-to-fiat", "100000000", "3", "USD")[:2] == (0, "3.0 USD")

    def test_debug_logging(self, capsys):
        rc, _, err = _run(capsys, "--log-level", "debug", "to-minimal", "1.2.3", "18")
        assert rc == 2
        assert "too many decimal points" in err
