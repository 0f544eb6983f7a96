from pathlib import Path

import pytest
import yaml


@pytest.fixture(scope="session")
def datadir():
    return Path(__file__).parent / "data"


@pytest.fixture()
def people_maybe_none(datadir):
    with (datadir / "people.yaml").open("rt") as file:
        contents = yaml.safe_load(file)
    return contents["people"]


@pytest.fixture()
def people(people_maybe_none):
    return [person for person in people_maybe_none if person is not None]
