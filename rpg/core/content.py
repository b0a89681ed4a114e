"""
Content module for the battle core.

Loads the character class definitions from JSON and gives by-name and
by-category access to them.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning
from character.character_class import CharacterClass

from core.constants import Category
from core.logging import log_debug
from core.randomizer import Randomizer
from core.utils import Singleton

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


class ClassRepository(metaclass=Singleton):
    """
    Registry of every character class, with fast by-name access.

    Attributes:
        classes (dict[str, CharacterClass]):
            The loaded classes, by name.

    """

    classes: dict[str, CharacterClass]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ClassRepository.

        Args:
            data_dir (Path | None):
                The directory containing the data files. The bundled data is
                loaded if the repository is used before being given one.

        """
        if data_dir:
            self.reload(data_dir)
        elif not hasattr(self, "classes"):
            self.reload(DEFAULT_DATA_DIR)

    def reload(self, root: Path) -> None:
        """
        (Re)load the class definitions from disk.

        Args:
            root (Path):
                The directory containing the data files.

        """
        self.classes = _load_json_file(
            root / "character_classes.json",
            self._load_character_classes,
            "character classes",
        )

    def get_class(self, name: str) -> CharacterClass | None:
        """Get a character class by name, or None if not found."""
        entry = self.classes.get(name)
        if entry is None:
            log_warning(
                f"Class '{name}' not found in ClassRepository.",
                {"name": name, "available": sorted(self.classes)},
            )
        return entry

    def classes_of(self, category: Category) -> list[CharacterClass]:
        """Returns the classes of a category, in definition order."""
        return [c for c in self.classes.values() if c.category == category]

    def random_class(self, category: Category, randomizer: Randomizer) -> CharacterClass:
        """
        Picks a class of the given category.

        Args:
            category (Category):
                The category to pick from.
            randomizer (Randomizer):
                Source of the pick.

        Returns:
            CharacterClass:
                The picked class.

        Raises:
            ValueError: If no class belongs to the category.

        """
        candidates = self.classes_of(category)
        if not candidates:
            raise ValueError(f"No class defined for category {category}")
        return candidates[randomizer.range(len(candidates))]

    @staticmethod
    def _load_character_classes(entries: list[dict]) -> dict[str, CharacterClass]:
        """
        Builds the validated class definitions, keyed by name.

        Raises:
            ValueError: If an entry is invalid or a name is defined twice.

        """
        classes: dict[str, CharacterClass] = {}
        for index, entry in enumerate(entries):
            character_class = CharacterClass.model_validate(entry)
            if character_class.name in classes:
                raise ValueError(
                    f"Duplicate class name: {character_class.name} (entry {index})"
                )
            classes[character_class.name] = character_class
        return classes


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """
    Reads a JSON list from disk and hands it to a loader.

    Args:
        filepath (Path):
            The file to read.
        loader_func (Callable[[list[dict]], dict[str, Any]]):
            Turns the raw entries into named objects.
        description (str):
            What the file contains, for the log.

    Returns:
        dict[str, Any]:
            The objects built by the loader.

    Raises:
        ValueError: If the file is missing, malformed, or rejected by the
            loader. The message names the file.

    """
    log_debug(f"Loading {description} from {filepath}")
    try:
        if not filepath.is_file():
            raise FileNotFoundError(f"No such data file: {filepath}")
        entries = json.loads(filepath.read_text(encoding="utf-8"))
        if not isinstance(entries, list):
            raise ValueError(f"Expected list in {filepath}, got {type(entries).__name__}")
        if not entries:
            raise ValueError(f"Empty data list in {filepath}")
        return loader_func(entries)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
