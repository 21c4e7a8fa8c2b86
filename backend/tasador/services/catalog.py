import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Union

from tasador.core.errors import CatalogLoadError, CatalogWriteError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_listings(path: PathLike) -> List[Dict]:
    """Read a JSON array of listing objects from disk, with no caching."""
    try:
        with open(path, encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Unable to load catalog %s: %s", path, exc)
        raise CatalogLoadError() from exc

    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        logger.error("Catalog %s is not a JSON array of objects", path)
        raise CatalogLoadError()
    return payload


def _file_mode(target: Path) -> int:
    # mkstemp creates files as 0600.
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_listings(path: PathLike, listings: Iterable[Mapping]) -> None:
    """Replace the catalog in one rename so readers never see a half-written file."""
    target = Path(path)
    content = json.dumps(list(listings), indent=2, ensure_ascii=False)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.chmod(tmp_name, _file_mode(target))
        os.replace(tmp_name, target)
    except OSError as exc:
        logger.error("Unable to write catalog %s: %s", target, exc)
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise CatalogWriteError() from exc


def _distinct(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))


def list_brands(listings: Iterable[Mapping]) -> List[str]:
    return _distinct(listing.get("marca") for listing in listings)


def list_models(listings: Iterable[Mapping], brand: str) -> List[str]:
    return _distinct(listing.get("modelo") for listing in listings if listing.get("marca") == brand)


def list_versions(listings: Iterable[Mapping], brand: str, model: str) -> List[str]:
    return _distinct(
        listing.get("version")
        for listing in listings
        if listing.get("marca") == brand and listing.get("modelo") == model
    )
