"""Sample root type used by the README walkthrough and the sample config."""

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass, field
from typing import Annotated

from function_schema_generator import SchemaInfo, schema_info


class Status(enum.Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    DONE = "done"
    FAILED = "failed"


@dataclass
class Options:
    flag: Annotated[bool, SchemaInfo(description="A flag option.", required=True)]
    items: Annotated[
        tuple[str, ...], SchemaInfo(description="A list of items.", format="uuid")
    ] = ()
    status: Status = field(
        default=Status.IDLE,
        metadata={"schema_info": SchemaInfo(name="item_status", description="Status of item.")},
    )


@schema_info(
    name="sampleFunction",
    description="This function does something interesting.",
    additional_properties=False,
    strict=True,
)
@dataclass
class SampleFunction:
    email: Annotated[
        str, SchemaInfo(description="A required string field.", required=True, format="email")
    ]
    purchased_date: Annotated[
        datetime.date,
        SchemaInfo(
            name="purchased_date",
            description="A required date field.",
            required=True,
            format="yyyy-mm-dd",
        ),
    ]
    options: Annotated[Options, SchemaInfo(description="Additional options for the function.")]
    count: Annotated[int | None, SchemaInfo(description="An optional number field.")] = None
