"""Tests for configuration constants."""

import importlib

import pytest

from primefield import config, field


def test_default_prime():
    assert config.PRIME == 2**127 - 1


def test_default_modulus_without_env(monkeypatch):
    monkeypatch.delenv("PRIMEFIELD_MODULUS", raising=False)
    assert config.default_modulus() == config.PRIME


@pytest.mark.parametrize("name", sorted(config.KNOWN_MODULI))
def test_known_moduli_are_3_mod_4(name):
    assert config.KNOWN_MODULI[name] % 4 == 3


@pytest.mark.parametrize("name", sorted(config.KNOWN_MODULI))
def test_known_moduli_pass_fermat(name):
    p = config.KNOWN_MODULI[name]
    for b in (2, 3, 5):
        assert field.power(p, b, p - 1) == 1


def test_bls12_381_modulus_size():
    assert config.KNOWN_MODULI["bls12_381"].bit_length() == 381


@pytest.mark.parametrize("raw, expected", [("43", 43), ("0x2f", 47), (" 47 ", 47)])
def test_env_override(monkeypatch, raw, expected):
    monkeypatch.setenv("PRIMEFIELD_MODULUS", raw)
    assert config.default_modulus() == expected


def test_malformed_env_raises_on_use(monkeypatch):
    monkeypatch.setenv("PRIMEFIELD_MODULUS", "abc")
    with pytest.raises(config.ConfigError, match="PRIMEFIELD_MODULUS='abc'"):
        config.default_modulus()


def test_malformed_env_does_not_break_import(monkeypatch):
    monkeypatch.setenv("PRIMEFIELD_MODULUS", "abc")
    from primefield import params

    importlib.reload(config)
    importlib.reload(params)
    assert field.add(47, 40, 10) == 3
    assert field.reciprocal(47, 5) == 19
    with pytest.raises(ValueError, match="PRIMEFIELD_MODULUS"):
        params.build_field()
