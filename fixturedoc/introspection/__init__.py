"""Entity model adapters."""

from .python_model import PythonModelAdapter
from .json_model import load_entity_model, dump_entity_model

__all__ = ["PythonModelAdapter", "load_entity_model", "dump_entity_model"]
