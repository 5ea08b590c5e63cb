import logging
import os
from pathlib import Path
logger = logging.getLogger(__name__)

def mkdir(path: str | Path, required: bool=True) -> bool:
    """Ensure ``path`` exists as a directory, creating parents as needed.

    Returns False instead of raising when the directory cannot be created,
    or when ``required`` is set and an existing directory is not writable.
    """
    target = Path(path)
    try:
        if target.is_dir():
            if required and not os.access(target, os.W_OK):
                logger.warning('Directory %s exists, but is not writable', target)
                return False
            return True
        if target.exists():
            logger.warning('%s exists and is not a directory', target)
            return False
        target.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning('Failed to create directory %s: %s', target, e)
        return False
    logger.debug('Created directory %s', target)
    return True
