import pytest

from app.sample_data import load_sample_csv

SCENARIO_CSV = """Student,Card,Points
Alice,Scales,10
Bob,Theory,5
Alice,Rhythm,20
"""


@pytest.fixture()
def sample_csv():
    return load_sample_csv()


@pytest.fixture()
def scenario_csv():
    return SCENARIO_CSV
