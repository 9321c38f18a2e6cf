"""People registry endpoints.

Each route declares its gate with `require_operation`, so an anonymous or
under-privileged caller is turned away before the request body is read.
Object filtering and the anti-enumeration collapse of find and delete happen
in `PersonService`.
"""

from typing import List

import structlog
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from src.adapters.api.v1.people.schemas import (
    AddPersonRequest,
    AddPersonResponse,
    PersonResponse,
)
from src.core.dependencies.auth import Identity, PeopleService
from src.domain.services.people.person_service import NewPerson
from src.permissions.dependencies import require_operation
from src.permissions.gates import ADD_PERSON, DELETE_PERSON, FIND_PERSON, LIST_PEOPLE

logger = structlog.get_logger(__name__)
router = APIRouter()

_ERROR_RESPONSES = {
    401: {"description": "No valid bearer token"},
    403: {"description": "Caller not allowed, or the person does not exist"},
}

# Role is published under components/schemas by the response models.
_ADD_PERSON_SCHEMA = AddPersonRequest.model_json_schema(
    by_alias=True, ref_template="#/components/schemas/{model}"
)
_ADD_PERSON_SCHEMA.pop("$defs", None)


async def add_person_payload(request: Request) -> AddPersonRequest:
    """Parse the add payload once the gate has let the caller through."""
    raw = await request.body()
    try:
        return AddPersonRequest.model_validate_json(raw)
    except ValidationError as exc:
        errors = [{**error, "loc": ("body", *error["loc"])} for error in exc.errors(include_url=False)]
        raise RequestValidationError(errors, body=raw) from exc


@router.api_route(
    "/person/add",
    methods=["POST", "PUT"],
    response_model=AddPersonResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a person (roles: admin)",
    responses={400: {"description": "Invalid payload"}, **_ERROR_RESPONSES},
    dependencies=[Depends(require_operation(ADD_PERSON))],
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": _ADD_PERSON_SCHEMA}},
        }
    },
)
def add_person(
    identity: Identity,
    service: PeopleService,
    payload: AddPersonRequest = Depends(add_person_payload),
):
    """Add a person; both HTTP methods share the same admin-only gate."""
    person = service.add_person(
        identity,
        NewPerson(
            first_name=payload.first_name,
            last_name=payload.last_name,
            title=payload.title,
            min_role=payload.min_role,
        ),
    )
    return AddPersonResponse(uuid=person.uuid, creation_date=person.creation_date)


@router.get(
    "/person/find/{person_id}",
    response_model=PersonResponse,
    summary="Find a person by identifier (roles: admin, user)",
    responses=_ERROR_RESPONSES,
    dependencies=[Depends(require_operation(FIND_PERSON))],
)
def find_person(person_id: str, identity: Identity, service: PeopleService):
    return PersonResponse.model_validate(service.find_person(identity, person_id))


@router.get(
    "/person/list",
    response_model=List[PersonResponse],
    summary="List the people visible to the caller (roles: admin, user)",
    responses=_ERROR_RESPONSES,
    dependencies=[Depends(require_operation(LIST_PEOPLE))],
)
def list_people(identity: Identity, service: PeopleService):
    return [PersonResponse.model_validate(person) for person in service.list_people(identity)]


@router.delete(
    "/person/delete/{person_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete a person (roles: admin)",
    responses=_ERROR_RESPONSES,
    dependencies=[Depends(require_operation(DELETE_PERSON))],
)
def delete_person(person_id: str, identity: Identity, service: PeopleService):
    service.delete_person(identity, person_id)
    return Response(status_code=status.HTTP_200_OK)
