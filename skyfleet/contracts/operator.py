"""Operator: who flies a flight, owns an aircraft, or holds a job.

Exactly one of a user or an airline. Older documents and client payloads
carry the nullable pair ``operator_id`` / ``operator_airline_id``;
``operator_from_ids`` converts them and enforces the exclusivity.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from skyfleet.contracts.errors import (
    DualOperatorAssigned,
    InvariantViolation,
    NoOperatorAssigned,
)


class UserOperator(BaseModel):
    kind: Literal["user"] = "user"
    id: str = Field(..., min_length=1, description="User account ID")

    model_config = ConfigDict(frozen=True)


class AirlineOperator(BaseModel):
    kind: Literal["airline"] = "airline"
    id: str = Field(..., min_length=3, max_length=3, description="Airline ICAO code")

    model_config = ConfigDict(frozen=True)


Operator = Annotated[Union[UserOperator, AirlineOperator], Field(discriminator="kind")]


def operator_from_ids(
    user_id: str | None,
    airline_id: str | None,
    entity: str = "flight",
    required: bool = True,
) -> UserOperator | AirlineOperator | None:
    """Build an operator from the nullable user/airline pair.

    Raises ``DualOperatorAssigned`` when both are set, and
    ``NoOperatorAssigned`` when neither is set and ``required``.
    """
    if user_id and airline_id:
        raise DualOperatorAssigned(entity, user_id, airline_id)
    if user_id:
        return UserOperator(id=user_id)
    if airline_id:
        return AirlineOperator(id=airline_id)
    if required:
        raise NoOperatorAssigned(entity)
    return None


def lift_operator_ids(
    data: dict,
    field: str,
    user_key: str,
    airline_key: str,
    entity: str,
    required: bool,
) -> dict:
    """``model_validator(mode="before")`` helper for the legacy id pair."""
    if not isinstance(data, dict):
        return data
    if user_key not in data and airline_key not in data:
        if required and data.get(field) is None:
            raise NoOperatorAssigned(entity)
        return data
    data = dict(data)
    user_id = data.pop(user_key, None)
    airline_id = data.pop(airline_key, None)
    if data.get(field) is not None:
        if user_id or airline_id:
            raise InvariantViolation(
                f"A {entity} takes either '{field}' or the {user_key}/{airline_key} pair, not both",
                {"entity": entity},
            )
        return data
    operator = operator_from_ids(user_id, airline_id, entity=entity, required=required)
    data[field] = operator.model_dump() if operator is not None else None
    return data
