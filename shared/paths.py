"""CDN path helpers."""


class PathResolver:
    """Join CDN base paths with relative file paths."""

    @staticmethod
    def resolve(base_path: str, relative_path: str, strict: bool = False) -> str:
        """
        Join base_path and relative_path with exactly one "/" between them.

        Args:
            base_path: Path prefix of the distribution (e.g., "/media")
            relative_path: Path of the file below the prefix, with or without a leading "/"
            strict: Accepted for call-site compatibility; does not change the result

        Returns:
            Absolute CDN path, or base_path untouched when relative_path is empty
        """
        if not relative_path:
            return base_path

        return f"{base_path.rstrip('/')}/{relative_path.lstrip('/')}"


class MediaPathGenerator:
    """Shard media files into nested directories keyed by media id."""

    def __init__(self, first_level: int = 100000, second_level: int = 1000):
        self.first_level = first_level
        self.second_level = second_level

    def generate_path(self, context: str, media_id: int) -> str:
        """Return the storage directory of a media item, e.g. "user/0001/01" for id 10."""
        if media_id is None or media_id < 0:
            raise ValueError(f"Invalid media id: {media_id!r}")

        rep_first = media_id // self.first_level
        rep_second = (media_id - rep_first * self.first_level) // self.second_level

        return f"{context}/{rep_first + 1:04d}/{rep_second + 1:02d}"
