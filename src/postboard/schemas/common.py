"""Shared schema types.

Learn: Mongo stores ids as bson ObjectId; the API exposes them as hex
strings under the document's own "_id" key.
"""

from typing import Annotated

from pydantic import BeforeValidator

ObjectIdStr = Annotated[str, BeforeValidator(str)]
