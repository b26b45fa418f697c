from app.decoder.base import BaseTextExtractor


class PlainTextAdapter(BaseTextExtractor):
    """Interprets bytes as UTF-8 text; undecodable sequences are replaced."""

    def extract(self, data: bytes) -> str:
        return data.decode("utf-8", errors="replace")
