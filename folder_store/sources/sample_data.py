"""Sample folder data used by the in-memory record source."""

import json
import logging
import random
from pathlib import Path
from typing import List, Union
from uuid import UUID

from pydantic import TypeAdapter

from ..models.folders import Folder


logger = logging.getLogger(__name__)

# Organizations with a known folder count in the generated data set
DEFAULT_ORG_ID = UUID("c1556e17-b7c0-45a3-a6ae-9546248fb17a")
SINGLE_FOLDER_ORG_ID = UUID("9727c9a2-52ec-4787-9d70-2125c0d77db4")

DEFAULT_ORG_FOLDERS = 666
OTHER_ORGS = 8
OTHER_ORG_FOLDERS = 40
DELETED_RATIO = 0.1

ADJECTIVES = [
    "sacred", "noted", "smashing", "creative", "quick", "helping", "ruling",
    "fluent", "sharp", "divine", "steady", "brave", "golden", "silent",
]
NOUNS = [
    "moonstar", "wildcat", "nova", "phoenix", "lizard", "ogre", "mantis",
    "wolf", "falcon", "cyclops", "storm", "titan", "harpy", "zodiac",
]

_folder_list = TypeAdapter(List[Folder])


def _random_uuid(rng: random.Random) -> UUID:
    return UUID(int=rng.getrandbits(128), version=4)


def generate_sample_folders(seed: int = 2022) -> List[Folder]:
    """Generate a deterministic, interleaved set of folders.

    ``DEFAULT_ORG_ID`` owns 666 folders, ``SINGLE_FOLDER_ORG_ID`` owns one and
    a handful of random organizations own the rest. The same seed always
    yields the same folders in the same order.
    """
    rng = random.Random(seed)

    owners = [DEFAULT_ORG_ID] * DEFAULT_ORG_FOLDERS + [SINGLE_FOLDER_ORG_ID]
    for _ in range(OTHER_ORGS):
        owners.extend([_random_uuid(rng)] * OTHER_ORG_FOLDERS)
    rng.shuffle(owners)

    folders = []
    for org_id in owners:
        folders.append(Folder(
            id=_random_uuid(rng),
            name=f"{rng.choice(ADJECTIVES)}-{rng.choice(NOUNS)}",
            org_id=org_id,
            deleted=rng.random() < DELETED_RATIO
        ))

    logger.debug(f"Generated {len(folders)} sample folders with seed {seed}")
    return folders


def load_sample_folders(path: Union[str, Path]) -> List[Folder]:
    """Load folders from a JSON array of folder objects.

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If an entry is not a valid folder
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    folders = _folder_list.validate_python(data)
    logger.info(f"Loaded {len(folders)} sample folders from {path}")
    return folders


def dump_sample_folders(folders: List[Folder], path: Union[str, Path]) -> None:
    """Write folders as a JSON array readable by ``load_sample_folders``."""
    Path(path).write_bytes(_folder_list.dump_json(folders, indent=2))
