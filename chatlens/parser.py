"""
WhatsApp Chat Parser for ChatLens
Parses bracketed exports ("[DD.MM.YY, HH:MM:SS] Sender: Content") into an
ordered message table, handling multiline messages, media and system lines.
"""

import re
import logging
from datetime import datetime
from typing import Callable, Dict, Iterator, List, Optional, Tuple
import emoji
import pandas as pd

from . import config
from .exceptions import EmptyInputError, NoMessagesParsedError, ParseError, UnrecognizedFormatError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]

# Unicode quirks
NBSP = "\u00A0"
NNBSP = "\u202F"
LRM = "\u200E"
RLM = "\u200F"
BOM = "\ufeff"

# [DD.MM.YY(YY), HH:MM[:SS]] Sender: Content
MESSAGE_RE = re.compile(
    r"""^
    \[(?P<day>\d{1,2})\.(?P<month>\d{1,2})\.(?P<year>\d{2,4}),?
    \s+(?P<hour>\d{1,2}):(?P<minute>\d{1,2})(?::(?P<second>\d{1,2}))?\]
    \s+(?P<sender>[^:]+):?
    \s*(?P<content>.*)
    """,
    re.VERBOSE,
)

# Media placeholders, matched case-insensitively
MEDIA_SNIPPETS = [
    "<media omitted>", "omitted>", "<media", "omitted",
    "<medya dahil edilmedi>", "dahil edilmedi",
]

# Media subtype keywords, checked in order
MEDIA_TYPES = [
    ("image", ["image", "görüntü", "fotoğraf"]),
    ("video", ["video"]),
    ("audio", ["audio", "ses"]),
    ("document", ["document", "belge"]),
]

# Group membership markers
SYSTEM_SNIPPETS = ["joined", "group", "left", "changed", "removed", "added", "created"]

# UTF-8 Turkish text mis-decoded as Latin-1 / cp1252
ENCODING_REPAIRS: Dict[str, str] = {
    "Ã\u0087": "Ç", "Ã‡": "Ç",
    "Ã§": "ç",
    "Ã\u0096": "Ö", "Ã–": "Ö",
    "Ã¶": "ö",
    "Ã\u009c": "Ü", "Ãœ": "Ü",
    "Ã¼": "ü",
    "Ä\u009e": "Ğ", "Äž": "Ğ",
    "Ä\u009f": "ğ", "ÄŸ": "ğ",
    "Ä°": "İ",
    "Ä±": "ı",
    "Å\u009e": "Ş", "Åž": "Ş",
    "Å\u009f": "ş", "ÅŸ": "ş",
}
MOJIBAKE_LEADS = ("Ã", "Ä", "Å")


def repair_encoding(text: str) -> str:
    """Best-effort repair of Turkish characters mangled by a wrong decode."""
    if not any(lead in text for lead in MOJIBAKE_LEADS):
        return text

    repaired = text
    for broken, fixed in ENCODING_REPAIRS.items():
        repaired = repaired.replace(broken, fixed)

    if repaired != text:
        logger.warning("Detected Turkish encoding corruption, applied character repairs")
    return repaired


def _strip_weird_unicode(s: str) -> str:
    """Remove invisible direction marks and BOMs, unify odd spaces."""
    if not s:
        return s
    s = s.replace(BOM, "")
    s = s.replace(LRM, "").replace(RLM, "")
    s = s.replace(NBSP, " ").replace(NNBSP, " ")
    return s


def _looks_like_system(content: str) -> bool:
    """Check if content is a group membership notice."""
    return any(snippet in content for snippet in SYSTEM_SNIPPETS)


def _is_media(content: str) -> bool:
    """Check if content is a media placeholder."""
    low = content.lower()
    return any(snip in low for snip in MEDIA_SNIPPETS)


def _media_type(content: str) -> Optional[str]:
    """Infer media subtype from placeholder text."""
    low = content.lower()
    for media_type, keywords in MEDIA_TYPES:
        if any(keyword in low for keyword in keywords):
            return media_type
    return None


def extract_emojis(text: str) -> List[str]:
    """Extract emoji code points from text, in order of appearance."""
    return [char for char in text if char in emoji.EMOJI_DATA]


def _build_timestamp(match: re.Match) -> datetime:
    """
    Build a timestamp from header fields.

    Two-digit years are read as 20YY. Fields that do not form a real
    calendar date fall back to the current time.
    """
    year_str = match.group("year")
    year = int(f"20{year_str}") if len(year_str) == 2 else int(year_str)
    second = match.group("second")

    try:
        return datetime(
            year,
            int(match.group("month")),
            int(match.group("day")),
            int(match.group("hour")),
            int(match.group("minute")),
            int(second) if second else 0,
        )
    except ValueError as e:
        logger.warning(f"Invalid date in header '{match.group(0)[:40]}' ({e}); using current time")
        return datetime.now()


def _iter_chunks(lines: List[str], chunk_size: int) -> Iterator[Tuple[int, List[str]]]:
    """Yield (start_index, chunk) pairs over the line list."""
    for start in range(0, len(lines), chunk_size):
        yield start, lines[start:start + chunk_size]


class WhatsAppParser:
    """Parse WhatsApp chat exports into a structured DataFrame."""

    COLUMNS = ["msg_id", "timestamp", "sender", "content", "type", "media_type", "emojis", "line_number"]

    def __init__(self, chunk_size: Optional[int] = None):
        self.chunk_size = chunk_size

    def parse_file(self, file_path: str, on_progress: Optional[ProgressCallback] = None) -> pd.DataFrame:
        """Parse WhatsApp export file from disk."""
        encodings = ["utf-8", "utf-8-sig", "cp1254", "latin1"]
        last_err: Optional[Exception] = None

        for enc in encodings:
            try:
                with open(file_path, "r", encoding=enc) as f:
                    text = f.read()
            except (UnicodeDecodeError, LookupError) as e:
                last_err = e
                continue
            return self.parse_text(text, on_progress=on_progress)

        raise ParseError(f"Failed to read file {file_path}: {last_err}")

    def parse_text(self, text: str, on_progress: Optional[ProgressCallback] = None) -> pd.DataFrame:
        """
        Parse WhatsApp export text already loaded in memory.

        Args:
            text: Raw export text
            on_progress: Optional callback receiving non-decreasing
                percentages, ending at 100

        Returns:
            DataFrame sorted by timestamp (stable), one row per message

        Raises:
            EmptyInputError: text is empty or whitespace
            UnrecognizedFormatError: no header line anywhere
            NoMessagesParsedError: no message could be built
        """
        if not text or not text.strip():
            raise EmptyInputError()

        text = repair_encoding(text)
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = [_strip_weird_unicode(ln) for ln in text.split("\n")]

        if not any(MESSAGE_RE.match(line) for line in lines):
            raise UnrecognizedFormatError()

        total_lines = len(lines)
        chunk_size = self.chunk_size or (
            config.PARSE_LARGE_CHUNK_SIZE
            if total_lines > config.PARSE_LARGE_FILE_LINES
            else config.PARSE_CHUNK_SIZE
        )

        messages: List[Dict] = []
        current: Optional[Dict] = None

        for start, chunk in _iter_chunks(lines, chunk_size):
            for offset, line in enumerate(chunk):
                m = MESSAGE_RE.match(line)
                if m:
                    if current:
                        messages.append(current)
                    current = {
                        "timestamp": _build_timestamp(m),
                        "sender": m.group("sender").strip(),
                        "content": m.group("content") or "",
                        "line_number": start + offset + 1,
                    }
                elif current is not None and line.strip():
                    # Multiline continuation
                    current["content"] += "\n" + line
                elif line.strip():
                    logger.debug(f"Orphaned line {start + offset + 1}: {line[:80]}")

            if on_progress:
                done = min(start + chunk_size, total_lines)
                on_progress(min(95, done * 95 // total_lines))

        if current:
            messages.append(current)

        if not messages:
            raise NoMessagesParsedError()

        logger.info(f"Parsed {len(messages)} raw messages from {total_lines} lines")

        step = max(1, len(messages) // 10)
        finalized = []
        for i, msg in enumerate(messages):
            finalized.append(self._finalize(msg, i))
            if on_progress and i % step == 0:
                on_progress(95 + min(5, i * 5 // len(messages)))

        df = (
            pd.DataFrame(finalized, columns=self.COLUMNS)
            .sort_values("timestamp", kind="stable")
            .reset_index(drop=True)
        )

        if on_progress:
            on_progress(100)

        logger.info(f"Parsed {len(df)} messages from {df['sender'].nunique()} senders")
        return df

    def _finalize(self, msg: Dict, msg_id: int) -> Dict:
        """Classify message type and extract emojis."""
        content = msg["content"]
        media_type = None

        if _is_media(content):
            msg_type = "media"
            media_type = _media_type(content)
        elif _looks_like_system(content):
            msg_type = "system"
        else:
            msg_type = "text"

        return {
            **msg,
            "msg_id": msg_id,
            "type": msg_type,
            "media_type": media_type,
            "emojis": extract_emojis(content) if msg_type == "text" else [],
        }


def parse(text: str, on_progress: Optional[ProgressCallback] = None) -> pd.DataFrame:
    """Parse raw export text into the ordered message table."""
    return WhatsAppParser().parse_text(text, on_progress=on_progress)


def validate_format(text: str, min_hits: int = 3) -> tuple[bool, str]:
    """
    Validate WhatsApp export format.
    Returns (is_valid, reason).
    """
    if not text or not text.strip():
        return False, "Chat export is empty"

    hits = 0
    for raw in text.splitlines():
        line = _strip_weird_unicode(raw)
        if MESSAGE_RE.match(line):
            hits += 1
            if hits >= min_hits:
                return True, "Format appears valid"

    if hits:
        return True, f"Only {hits} message line(s) found"
    return False, "No lines match expected WhatsApp format"


if __name__ == "__main__":
    # Test parser
    print("WhatsApp Parser Test")
    print("Expected format: [DD.MM.YY, HH:MM:SS] Name: Message")
    print("\nExample:")
    print("[25.12.23, 14:30:05] Ayşe: Merhaba! Nasılsın? 😊")
    print("[25.12.23, 14:32:10] Mehmet: İyiyim canım ❤️")
