from typing import Annotated

from pydantic import Field

# Largest value a SQLite INTEGER column can hold
MAX_SQLITE_INTEGER = 2**63 - 1

EntityId = Annotated[int, Field(ge=1, le=MAX_SQLITE_INTEGER)]
