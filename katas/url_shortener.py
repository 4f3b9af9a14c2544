from typing import Dict

URL_ALLOWED_CHARS = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789-_.~!*'();:@&=+$,/?#[]"
)


class UrlShortener:
    """
    Hands out short codes for URLs and maps them back.

    Codes come from a per-instance counter written in base
    len(URL_ALLOWED_CHARS). Mappings live only as long as the instance.
    """

    def __init__(self, alphabet: str = URL_ALLOWED_CHARS):
        if len(set(alphabet)) != len(alphabet) or len(alphabet) < 2:
            raise ValueError("alphabet needs at least two distinct characters")
        self.alphabet = alphabet
        self.base = len(alphabet)
        self.counter = 0
        self.url_map: Dict[str, str] = {}

    def encode(self, url: str) -> str:
        code = self.generate_short_code(self.counter)
        self.counter += 1
        self.url_map[code] = url
        return code

    def decode(self, code: str) -> str:
        """Raises KeyError for a code this instance never issued."""
        try:
            return self.url_map[code]
        except KeyError:
            raise KeyError(f"unknown short code {code!r}") from None

    def generate_short_code(self, num: int) -> str:
        if num == 0:
            return self.alphabet[0]
        digits = []
        while num > 0:
            num, rem = divmod(num, self.base)
            digits.append(self.alphabet[rem])
        return "".join(reversed(digits))
