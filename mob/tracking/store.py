"""Load and save the tracking document.

The document is read fresh at the start of every command and rewritten in
full on save. There is no locking; mob assumes a single operator.
"""

from pathlib import Path

from pydantic import ValidationError

from mob.errors import StorageError
from mob.paths import get_tracking_file
from mob.tracking.models import TrackingDocument


class TrackingStore:
    """Persistence for the TrackingDocument of one repository."""

    def __init__(self, repo_root: Path):
        self.repo_root = Path(repo_root)

    @property
    def path(self) -> Path:
        return get_tracking_file(self.repo_root)

    def load(self) -> TrackingDocument:
        """Load the tracking document from disk.

        Returns:
            The stored document, or an empty one if no file exists yet.

        Raises:
            StorageError: If the file cannot be read or is not a valid
                tracking document.
        """
        path = self.path
        if not path.exists():
            return TrackingDocument()

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read tracking data from {path}: {e}")
        except UnicodeDecodeError as e:
            raise StorageError(f"Corrupt tracking data in {path}: {e}")

        try:
            return TrackingDocument.model_validate_json(text)
        except ValidationError as e:
            raise StorageError(f"Corrupt tracking data in {path}: {e}")

    def save(self, document: TrackingDocument) -> None:
        """Write the tracking document, replacing the previous contents.

        Raises:
            StorageError: If the .mob directory or the file cannot be written.
        """
        path = self.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(document.model_dump_json(indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to save tracking data to {path}: {e}")
