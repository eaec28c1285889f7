import os
import sys
import random
import string

import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

from huffman_codec import HuffmanCodec
from huffman_errors import DecodeError, EncodeError, HuffmanError

ALPHABET = string.ascii_letters + ", "


def _roundtrip(text):
	codec = HuffmanCodec(text)
	encoded = codec.encode(text)
	assert set(encoded) <= {'0', '1'}
	return codec.decode(encoded)


def test_roundtrip_concrete_scenario():
	codec = HuffmanCodec("aaabbcdf")
	assert codec.frequencies == {'a': 3, 'b': 2, 'c': 1, 'd': 1, 'f': 1}
	assert len(codec.codes) == 5
	assert codec.decode(codec.encode("aaabbcdf")) == "aaabbcdf"


def test_roundtrip_sentence():
	text = "Hello, World, this is a Huffman code"
	assert _roundtrip(text) == text


def test_roundtrip_random_texts():
	rng = random.Random(7)
	for n in (1, 2, 3, 17, 200):
		text = ''.join(rng.choice(ALPHABET) for _ in range(n))
		assert _roundtrip(text) == text


def test_encode_depends_only_on_filtered_text():
	raw = "Wow!! 3 cats, 2 dogs...\n"
	codec = HuffmanCodec(raw)
	filtered = codec.logic.filter_text(raw)

	assert codec.encode(raw) == codec.encode(filtered)
	assert codec.decode(codec.encode(raw)) == filtered


def test_encode_skips_unknown_characters():
	codec = HuffmanCodec("abab")
	assert codec.encode("axb") == codec.encode("ab")


def test_encode_empty():
	codec = HuffmanCodec("some text")
	assert codec.encode("") == ""
	assert codec.decode("") == ""


def test_single_symbol_roundtrip():
	text = "aaaaaaa"
	codec = HuffmanCodec(text)

	assert codec.tree.is_leaf()
	assert codec.codes == {'a': ''}
	encoded = codec.encode(text)
	assert len(encoded) == len(text)
	assert codec.decode(encoded) == text


def test_empty_source_codec():
	codec = HuffmanCodec("12345?!")
	assert codec.tree is None
	assert codec.codes == {}
	assert codec.encode("anything") == ""
	assert codec.decode("0101") == ""


def test_decode_truncates_trailing_bits():
	codec = HuffmanCodec("aaabbcdf")
	encoded = codec.encode("abc")
	# the longest code is at least two bits, so one extra bit never reaches a leaf
	longest = max(codec.codes.values(), key=len)
	assert codec.decode(encoded + longest[:-1]) == "abc"


def test_codes_property_is_a_copy():
	codec = HuffmanCodec("abc")
	codec.codes['z'] = '0'
	assert 'z' not in codec.codes


def test_strict_encode_raises_on_unknown_character():
	codec = HuffmanCodec("abc", strict=True)
	with pytest.raises(EncodeError) as excinfo:
		codec.encode("ab!c")
	assert excinfo.value.char == '!'
	assert excinfo.value.position == 2


def test_strict_decode_raises_on_trailing_bits():
	codec = HuffmanCodec("aaabbcdf", strict=True)
	encoded = codec.encode("ab")
	longest = max(codec.codes.values(), key=len)
	with pytest.raises(DecodeError) as excinfo:
		codec.decode(encoded + longest[:-1])
	assert excinfo.value.position == len(encoded)


def test_strict_decode_without_tree():
	codec = HuffmanCodec("", strict=True)
	assert codec.decode("") == ""
	with pytest.raises(HuffmanError):
		codec.decode("1")


def test_strict_matches_lenient_on_clean_input():
	text = "abracadabra, alakazam"
	lenient = HuffmanCodec(text)
	strict = HuffmanCodec(text, strict=True)
	assert strict.encode(text) == lenient.encode(text)
	assert strict.decode(strict.encode(text)) == text


@pytest.mark.timeout(60)
def test_roundtrip_larger_text():
	rng = random.Random(2020)
	text = ''.join(rng.choice(ALPHABET) for _ in range(50 * 1024))
	assert _roundtrip(text) == text
