"""Seed validation and text encoding."""

from __future__ import annotations

import base64

import pytest

from backend.models.seed import SEED_SIZE, Seed


def test_random_seeds_have_fixed_size() -> None:
    a, b = Seed.random(), Seed.random()
    assert len(a.value) == SEED_SIZE
    assert a != b


@pytest.mark.parametrize("size", [0, 16, 31, 33])
def test_wrong_length_rejected(size: int) -> None:
    with pytest.raises(ValueError):
        Seed(bytes(size))


def test_encoding_is_padded_url_safe() -> None:
    seed = Seed(bytes([0xFB, 0xFF] * 16))
    text = seed.encode()
    assert len(text) == 44
    assert text.endswith("=")
    assert "+" not in text and "/" not in text
    assert Seed.decode(text) == seed


def test_unpadded_text_decodes() -> None:
    seed = Seed.random()
    assert Seed.decode(seed.encode().rstrip("=")) == seed


def test_zero_seed_text() -> None:
    assert Seed(bytes(32)).encode() == "A" * 43 + "="


@pytest.mark.parametrize("text", ["", "abc", "!!!!", "é" * 44])
def test_bad_text_rejected(text: str) -> None:
    with pytest.raises(ValueError):
        Seed.decode(text)


GOOD_TEXT = Seed(bytes(32)).encode()


@pytest.mark.parametrize(
    "text",
    [
        "@" + GOOD_TEXT,
        GOOD_TEXT[:10] + "!!" + GOOD_TEXT[10:],
        GOOD_TEXT[:5] + "." + GOOD_TEXT[6:],
        GOOD_TEXT[:20] + "=" + GOOD_TEXT[21:],
        GOOD_TEXT[:43] + " =",
    ],
    ids=["leading-at", "inner-bangs", "dot", "inner-padding", "inner-space"],
)
def test_illegal_character_in_full_length_text(text: str) -> None:
    with pytest.raises(ValueError):
        Seed.decode(text)


def test_standard_alphabet_rejected() -> None:
    raw = bytes([0xFB, 0xFF] * 16)
    text = base64.b64encode(raw).decode("ascii")
    assert "+" in text or "/" in text
    with pytest.raises(ValueError):
        Seed.decode(text)
    assert Seed.decode(Seed(raw).encode()).value == raw


def test_coerce_accepts_all_forms() -> None:
    seed = Seed.random()
    assert Seed.coerce(seed) is seed
    assert Seed.coerce(seed.value) == seed
    assert Seed.coerce(seed.encode()) == seed
    assert bytes(seed) == seed.value
    assert str(seed) == seed.encode()


@pytest.mark.parametrize("value", [32, 0, None, [0] * 32, 1.5])
def test_coerce_rejects_other_types(value: object) -> None:
    with pytest.raises(TypeError):
        Seed.coerce(value)  # type: ignore[arg-type]


def test_coerce_accepts_bytearray() -> None:
    assert Seed.coerce(bytearray(32)) == Seed(bytes(32))
