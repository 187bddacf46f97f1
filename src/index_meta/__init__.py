from index_meta.description import IndexDescription, IndexDescriptionBuilder
from index_meta.fields import FIELD_NAMES

__all__ = ["FIELD_NAMES", "IndexDescription", "IndexDescriptionBuilder"]
