"""JSON file storage with Result-based error handling.

Reads and writes the small JSON documents taskhours deals with (scenario
scripts and the settings file), returning Result types instead of raising.
"""

import json
from pathlib import Path
from typing import Any

from taskhours.domain.shared.result import Err, Ok, Result


class JsonStorage:
    """Low-level JSON file I/O with Result-based error handling.

    Example:
        storage = JsonStorage()
        result = storage.load_json(Path("scenario.json"))
        if isinstance(result, Ok):
            data = result.value
        else:
            print(f"Error: {result.error}")
    """

    def load_json(self, path: Path) -> Result[dict[str, Any], str]:
        """Load a JSON object from a file.

        Args:
            path: Path to the JSON file to read.

        Returns:
            Ok(dict) with the parsed object, or Err(str) when the file is
            missing, unreadable, not UTF-8, not JSON, or not a JSON object.
        """
        try:
            if not path.exists():
                return Err(f"File not found: {path}")

            data = json.loads(path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            return Err(f"Invalid encoding in {path}: {e}")
        except json.JSONDecodeError as e:
            return Err(f"Invalid JSON in {path}: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

        if not isinstance(data, dict):
            return Err(f"Expected a JSON object in {path}")
        return Ok(data)

    def save_json(
        self,
        path: Path,
        data: dict[str, Any],
        indent: int = 2,
    ) -> Result[None, str]:
        """Save a JSON object to a file, creating parent directories.

        Returns:
            Ok(None) if successful, Err(str) with error message if failed.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(data, indent=indent), encoding="utf-8")
            return Ok(None)
        except TypeError as e:
            return Err(f"Data not JSON serializable: {e}")
        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            return Err(f"Error writing {path}: {e}")
