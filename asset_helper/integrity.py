import base64
import hashlib

SRI_ALGORITHMS = ('sha256', 'sha384', 'sha512')


def integrity_hash(content, algorithm='sha256'):
    """
    Subresource Integrity value for `content`, e.g. `sha256-EVOkCA8fywRCWqC4QcKxRgb+bfJdkHbSofrOLVr1cSk=`
    """
    if algorithm not in SRI_ALGORITHMS:
        raise ValueError(f'{algorithm!r} is not a valid integrity algorithm, use one of {", ".join(SRI_ALGORITHMS)}')
    digest = hashlib.new(algorithm, content).digest()
    return f'{algorithm}-{base64.b64encode(digest).decode("ascii")}'
