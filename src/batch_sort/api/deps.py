# src/batch_sort/api/deps.py
from typing import Annotated

from fastapi import Depends

from batch_sort.core.config import Settings, get_settings

SettingsDep = Annotated[Settings, Depends(get_settings)]
