from fastapi import APIRouter, Depends, Request

from form_api import schemas
from form_api.services.form_fields import FormFieldsGateway, get_gateway

router = APIRouter(
    prefix="/form-fields",
    tags=["Form Fields"],
    responses={500: {"model": schemas.ErrorOut}},
)

FORM_FIELDS_BODY_SCHEMA = {
    "type": "object",
    "properties": {"formFields": {"type": "array", "items": schemas.FormField.model_json_schema()}},
}


async def read_raw_body(request: Request) -> bytes:
    return await request.body()


@router.get("", response_model=schemas.FormFieldsRead, response_model_exclude_unset=True)
def read_form_fields(gateway: FormFieldsGateway = Depends(get_gateway)):
    """Возвращает все поля формы из таблицы."""
    records = gateway.handle_read()
    return schemas.FormFieldsRead(form_fields=[schemas.FormField(**record) for record in records])


@router.post(
    "",
    response_model=schemas.MessageOut,
    responses={400: {"model": schemas.MessageOut}},
    openapi_extra={
        "requestBody": {"required": True, "content": {"application/json": {"schema": FORM_FIELDS_BODY_SCHEMA}}}
    },
)
def replace_form_fields(
    body: bytes = Depends(read_raw_body),
    gateway: FormFieldsGateway = Depends(get_gateway),
):
    """
    Полностью перезаписывает таблицу полей: сначала очищает диапазон, затем пишет новые строки.
    Тело читается сырым, чтобы невалидный JSON отдавал 400, а не 422.
    """
    gateway.handle_write_body(body)
    return schemas.MessageOut(message="Form fields updated successfully")
