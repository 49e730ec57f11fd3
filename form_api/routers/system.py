from fastapi import APIRouter

from form_api import schemas
from form_api.services import sheets_config

router = APIRouter(prefix="/system", tags=["System"])


@router.get("/sheets", response_model=schemas.SheetsSettingsRead)
def read_sheets_settings():
    """
    Показывает, куда смотрит API: id таблицы, диапазон и тип credentials (без секретов).
    """
    return schemas.SheetsSettingsRead(**sheets_config.get_settings())
