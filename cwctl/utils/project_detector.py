"""Project type detection from directory contents."""

import logging
import os
from collections import Counter
from pathlib import Path
from typing import Callable, Tuple, Union

from ..core.constants import (
    LANGUAGE_EXTENSIONS,
    LANGUAGE_MARKERS,
    LIBERTY_SERVER_XML,
    NODE_MANIFEST,
    POM_FILE_NAME,
    SKIPPED_SCAN_DIRS,
    SPRING_BOOT_GROUP_ID,
    SWIFT_MANIFEST,
)
from ..models.project import BuildType, Language, ProjectInfo

logger = logging.getLogger(__name__)


def _has_liberty_server_xml(project_path: Path) -> bool:
    return (project_path / LIBERTY_SERVER_XML).is_file()


def _is_spring_boot(project_path: Path) -> bool:
    pom = project_path / POM_FILE_NAME
    if not pom.is_file():
        return False
    try:
        return SPRING_BOOT_GROUP_ID in pom.read_text(errors="ignore")
    except OSError as e:
        logger.warning(f"Could not read {pom}: {e}")
        return False


def _has_node_manifest(project_path: Path) -> bool:
    return (project_path / NODE_MANIFEST).is_file()


def _has_swift_manifest(project_path: Path) -> bool:
    return (project_path / SWIFT_MANIFEST).is_file()


# Evaluated top to bottom, first match wins
DETECTION_RULES: Tuple[Tuple[Callable[[Path], bool], ProjectInfo], ...] = (
    (_has_liberty_server_xml, ProjectInfo(Language.JAVA, BuildType.LIBERTY)),
    (_is_spring_boot, ProjectInfo(Language.JAVA, BuildType.SPRING)),
    (_has_node_manifest, ProjectInfo(Language.JAVASCRIPT, BuildType.NODEJS)),
    (_has_swift_manifest, ProjectInfo(Language.SWIFT, BuildType.SWIFT)),
)


def determine_project_info(project_path: Union[str, Path]) -> ProjectInfo:
    """Infer the language and build type of a project.

    Projects that match none of the build rules are built from their
    Dockerfile, with the language guessed from marker files and then from
    the most common source file extension.

    Args:
        project_path: Root directory of the project

    Returns:
        ProjectInfo with language and build type
    """
    project_path = Path(project_path)
    for predicate, info in DETECTION_RULES:
        if predicate(project_path):
            logger.debug(f"Detected {info.language.value}/{info.build_type.value} project at {project_path}")
            return info

    language = determine_project_language(project_path)
    logger.debug(f"Detected {language.value}/docker project at {project_path}")
    return ProjectInfo(language, BuildType.DOCKER)


def determine_project_language(project_path: Path) -> Language:
    """Guess a project's language when no build rule matched."""
    for language, markers in LANGUAGE_MARKERS.items():
        for marker in markers:
            if (project_path / marker).exists():
                return Language(language)

    extension_languages = {}
    for language, extensions in LANGUAGE_EXTENSIONS.items():
        for extension in extensions:
            extension_languages[extension] = language

    counts = Counter()
    for root, dirs, files in os.walk(project_path):
        dirs[:] = [d for d in dirs if not d.startswith('.') and d not in SKIPPED_SCAN_DIRS]
        for name in files:
            language = extension_languages.get(os.path.splitext(name)[1])
            if language:
                counts[language] += 1

    if not counts:
        return Language.UNKNOWN

    # Ties go to whichever language is listed first
    order = list(LANGUAGE_EXTENSIONS)
    best = max(counts, key=lambda lang: (counts[lang], -order.index(lang)))
    return Language(best)
