"""Primary-key bounds shared by path parameters and payload label ids."""

from typing import Annotated

from pydantic import Field

# Largest value of the int4 ``serial`` id columns.
ROW_ID_MAX = 2_147_483_647

RowId = Annotated[int, Field(ge=1, le=ROW_ID_MAX)]


def is_storable_id(value: int) -> bool:
    """Whether ``value`` can name a row in an int4 id column."""

    return 1 <= value <= ROW_ID_MAX
