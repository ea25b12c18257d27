from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr

from ..patterns import Language

REPO_URL_DESC = "GitHub repository URL (e.g., https://github.com/user/repo)"
INCLUDE_DESC = "Unix shell-style patterns to include (e.g., ['*.py', '*.js'])"
EXCLUDE_DESC = "Unix shell-style patterns to exclude (e.g., ['node_modules/*', '*.log'])"
MAX_FILE_SIZE_DESC = "Maximum file size in bytes to process"
LANGUAGE_DESC = "Programming language to analyze"

# Field types shared by the params models below and the tool handler
# signatures, so the advertised input schema is the one dispatch enforces.
RepoUrl = Annotated[StrictStr, Field(min_length=1, description=REPO_URL_DESC)]
IncludePatterns = Annotated[Optional[List[StrictStr]], Field(min_length=1, description=INCLUDE_DESC)]
ExcludePatterns = Annotated[Optional[List[StrictStr]], Field(min_length=1, description=EXCLUDE_DESC)]
# 0 is rejected rather than read as "unset"; bools and numeric strings are not ints here
MaxFileSize = Annotated[Optional[StrictInt], Field(gt=0, description=MAX_FILE_SIZE_DESC)]
# not strict: the wire value "python" must coerce to Language.PYTHON
LanguageArg = Annotated[Language, Field(description=LANGUAGE_DESC)]


class RepoParams(BaseModel):
    """
    Base input for every tool:
      - repo_url: repository reference handed to gitingest as-is (no URL parsing here)
    """

    repo_url: RepoUrl


class IngestRepoParams(RepoParams):
    include_patterns: IncludePatterns = None
    exclude_patterns: ExcludePatterns = None
    max_file_size: MaxFileSize = None


class RepoStructureParams(RepoParams):
    pass


class AnalyzeCodeParams(RepoParams):
    language: LanguageArg


class RepoDocsParams(RepoParams):
    pass
