import logging
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "standard"


@dataclass(frozen=True)
class Charset:
    """An ordered glyph ramp. Index 0 is the darkest glyph, the last is the lightest."""

    name: str
    glyphs: str

    def __post_init__(self):
        if not self.glyphs:
            raise ValueError(f"Charset {self.name!r} has no glyphs")

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, index: int) -> str:
        return self.glyphs[index]


STANDARD = " .:-=+*#%@"

DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Light, medium and dark shade followed by full block
BLOCKS = " ░▒▓█"

MINIMAL = " .+#@"

CHARSETS = MappingProxyType(
    {
        "standard": Charset("standard", STANDARD),
        "detailed": Charset("detailed", DETAILED),
        "blocks": Charset("blocks", BLOCKS),
        "minimal": Charset("minimal", MINIMAL),
    }
)


def charset_names() -> list[str]:
    return list(CHARSETS)


def lookup(charset_id: str) -> Charset:
    """Return the charset registered under ``charset_id``, or the default one."""
    try:
        return CHARSETS[charset_id]
    except KeyError:
        logger.debug("Unknown charset %r, using %r", charset_id, DEFAULT_CHARSET)
        return CHARSETS[DEFAULT_CHARSET]
