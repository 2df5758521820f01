"""Vulture whitelist — methods called by frameworks, not direct code."""

# Pydantic validators — called by Pydantic, not our code
from godocjson.docmodel import DocType, DocValue

DocType.validate_decl
DocValue.validate_decl

from godocjson.fileset import FileSet, SourceFile

SourceFile.validate_lines
SourceFile.validate_range
FileSet.validate_disjoint

from godocjson.loader import ModelDump

ModelDump.wrap_files
