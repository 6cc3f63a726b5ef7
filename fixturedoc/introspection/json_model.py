"""
JSON entity model adapter.

Reads an entity model exported by an external reflection tool (for example
a doclet walking compiled fixture classes) and writes the model of an
introspected Python package in the same format.

Format:
    {
      "classes": [
        {
          "qualified_name": "shop.fixtures.CartFixture",
          "name": "CartFixture",
          "doc_comment": "...",
          "constructors": [...],
          "methods": [...],
          "constants": [...],
          "nested": [...],
          "supertypes": [...]
        }
      ]
    }
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List

from pydantic import ValidationError

from fixturedoc.doctags import parse_doc_tags, thrown_types
from fixturedoc.errors import EntityModelError
from fixturedoc.schemas import ClassModel, EntityModel, ExecutableModel

logger = logging.getLogger(__name__)


def load_entity_model(path: Path) -> List[ClassModel]:
    """
    Load class entities from a JSON entity model.

    Entities that carry a doc comment but no tags get their tags parsed
    from the doc comment.

    Args:
        path: Path to the JSON document

    Returns:
        List of ClassModel

    Raises:
        EntityModelError: If the file is missing, not JSON or not a valid model
    """
    path = Path(path)
    try:
        model = EntityModel.model_validate_json(path.read_text(encoding='utf-8'))
    except OSError as e:
        raise EntityModelError(f"Cannot read entity model {path}: {e}") from e
    except ValidationError as e:
        raise EntityModelError(f"Invalid entity model {path}: {e}") from e

    classes = [_with_tags(class_model) for class_model in model.classes]
    logger.info(f"Loaded {len(classes)} classes from {path}")
    return classes


def dump_entity_model(classes: Iterable[ClassModel], path: Path) -> Path:
    """Write class entities as a JSON entity model."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    model = EntityModel(classes=list(classes))
    path.write_text(json.dumps(model.model_dump(), indent=2), encoding='utf-8')
    logger.info(f"Saved entity model with {len(model.classes)} classes: {path}")
    return path


def _with_tags(class_model: ClassModel) -> ClassModel:
    """Copy of the class with missing tags parsed from doc comments."""
    return class_model.model_copy(update={
        "tags": class_model.tags or parse_doc_tags(class_model.doc_comment),
        "constructors": [_executable_with_tags(c) for c in class_model.constructors],
        "methods": [_executable_with_tags(m) for m in class_model.methods],
        "nested": [_with_tags(n) for n in class_model.nested],
        "supertypes": [_with_tags(s) for s in class_model.supertypes],
    })


def _executable_with_tags(executable: ExecutableModel) -> ExecutableModel:
    if executable.tags or not executable.doc_comment:
        return executable
    tags = parse_doc_tags(executable.doc_comment)
    thrown = executable.thrown_types or thrown_types(tags)
    return executable.model_copy(update={"tags": tags, "thrown_types": thrown})
