import pytest

from funcprimer.core.data_models import Patient, PatientRegistry
from funcprimer.data.fixtures import PATIENTS


@pytest.fixture
def patients():
    return PATIENTS


@pytest.fixture
def empty_registry():
    return PatientRegistry()


@pytest.fixture
def make_patient():
    def _make(full_name="Test Patient", age=40, diagnosis="A00 Test", days=3):
        return Patient(full_name=full_name, age=age, diagnosis=diagnosis, days=days)

    return _make
