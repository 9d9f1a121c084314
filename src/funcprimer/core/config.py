from pydantic import BaseModel, ConfigDict, Field

from funcprimer.core.enums import Diagnosis


class Settings(BaseModel):
    """Constants shared by the demo routines."""

    model_config = ConfigDict(frozen=True)

    AGE_THRESHOLD: int = Field(60, ge=0)
    MIN_BED_DAYS: int = Field(5, ge=0)
    FACTORY_DIAGNOSIS: str = Diagnosis.BACTERIAL_PNEUMONIA.value
    COMPOSITION_DIAGNOSIS: str = Diagnosis.INFLUENZA_WITH_PNEUMONIA.value
    NUMBERS_UPPER_BOUND: int = Field(10, ge=1)

    @classmethod
    def load(cls) -> "Settings":
        return cls()


settings = Settings.load()
