"""
Archive packaging for generated code.

Orders extracted objects so dependencies come first, renders each
selected object with one generator, and zips the results.
"""

import asyncio
import io
import zipfile
from typing import Dict, Iterable, List, Sequence

from ..logging_config import get_logger
from .core.generator import CodeGenerator, GenerationError
from .core.schema import ObjectDefinition
from .registry import OptionsLike, create_generator

logger = get_logger(__name__)


def order_by_dependency(objects: Sequence[ObjectDefinition]) -> List[ObjectDefinition]:
    """
    Order objects so every dependency precedes its dependents.

    Depth-first over ``dependencies`` in input order. An edge back to an
    object still being visited closes a cycle; it is logged and ignored,
    so every object is emitted exactly once. Dependencies that are not in
    ``objects`` are skipped.
    """
    by_id = {obj.id: obj for obj in objects}
    visited = set()
    visiting = set()
    ordered: List[ObjectDefinition] = []

    def visit(obj: ObjectDefinition):
        if obj.id in visited:
            return

        visiting.add(obj.id)
        for dep_id in obj.dependencies:
            dependency = by_id.get(dep_id)
            if dependency is None:
                logger.debug("%s depends on unknown object %s", obj.name, dep_id)
                continue
            if dep_id in visiting:
                logger.warning(
                    "Dependency cycle: %s -> %s; ignoring this edge",
                    obj.name,
                    dependency.name,
                )
                continue
            visit(dependency)

        visiting.discard(obj.id)
        visited.add(obj.id)
        ordered.append(obj)

    for obj in objects:
        visit(obj)

    return ordered


def render_objects(
    objects: Sequence[ObjectDefinition],
    selected_ids: Iterable[str],
    generator: CodeGenerator,
) -> Dict[str, str]:
    """
    Generate source for the selected objects in dependency order.

    Returns:
        Mapping of archive file name to source text. A later object whose
        file name repeats an earlier one replaces it.

    Raises:
        GenerationError: On the first object that fails to render
    """
    selected = set(selected_ids)
    files: Dict[str, str] = {}

    for obj in order_by_dependency(objects):
        if obj.id not in selected:
            continue

        try:
            code = generator.generate(obj.schema, obj.name)
        except GenerationError:
            logger.error("Aborting archive: %s could not be generated", obj.name)
            raise

        filename = f"{obj.name}{generator.file_extension}"
        if filename in files:
            logger.warning("%s generated twice; keeping the last one", filename)
            del files[filename]
        files[filename] = code

    return files


def build_archive(files: Dict[str, str]) -> bytes:
    """Zip file contents in memory, one DEFLATE entry per file."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for filename, content in files.items():
            archive.writestr(filename, content)
    return buffer.getvalue()


async def generate_zip(
    objects: Sequence[ObjectDefinition],
    selected_ids: Iterable[str],
    language: str,
    options: OptionsLike = None,
) -> bytes:
    """
    Generate an archive with one source file per selected object.

    Args:
        objects: Extracted object definitions
        selected_ids: Ids of the objects to include
        language: Target language name or alias
        options: Generator options, overrides dict, or config file path

    Returns:
        ZIP archive bytes

    Raises:
        UnsupportedLanguage: Before any generation, if the language is unknown
        GenerationError: If any selected object fails to render
    """
    generator = create_generator(language, options)
    files = render_objects(objects, selected_ids, generator)
    logger.info("Packaging %d %s files", len(files), generator.language_name)
    return await asyncio.to_thread(build_archive, files)


def generate_zip_sync(
    objects: Sequence[ObjectDefinition],
    selected_ids: Iterable[str],
    language: str,
    options: OptionsLike = None,
) -> bytes:
    """Blocking wrapper around ``generate_zip`` for non-async callers."""
    return asyncio.run(generate_zip(objects, selected_ids, language, options))

