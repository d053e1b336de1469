import pytest

from asset_helper.integrity import integrity_hash

FOX = b'the quick brown fox jumps over the lazy dog\n'


def test_integrity_hash():
    assert integrity_hash(FOX) == 'sha256-EVOkCA8fywRCWqC4QcKxRgb+bfJdkHbSofrOLVr1cSk='


def test_integrity_hash_empty():
    assert integrity_hash(b'') == 'sha256-47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU='


@pytest.mark.parametrize('algorithm, length', [('sha384', 64), ('sha512', 88)])
def test_integrity_hash_other_algorithms(algorithm, length):
    value = integrity_hash(FOX, algorithm)
    prefix, _, digest = value.partition('-')
    assert prefix == algorithm
    assert len(digest) == length


def test_integrity_hash_invalid_algorithm():
    with pytest.raises(ValueError) as e:
        integrity_hash(FOX, 'md5')

    assert str(e.value) == "'md5' is not a valid integrity algorithm, use one of sha256, sha384, sha512"
