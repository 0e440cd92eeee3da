import pytest

from midilights.colors import Rgb
from midilights.patch import Patch


class FakeChain:
    def __init__(self, to_json_result=None, on_execute=None):
        self.calls = []
        self.to_json_result = to_json_result or {}
        self.on_execute = on_execute

    def activate(self):
        self.calls.append(("activate",))

    def deactivate(self):
        self.calls.append(("deactivate",))

    def execute(self, strip, note_to_light_map):
        self.calls.append(("execute", dict(note_to_light_map)))
        if self.on_execute is not None:
            self.on_execute(strip)

    def to_json(self):
        return self.to_json_result

    def from_json(self, converted):
        self.calls.append(("from_json", converted))


class FakeFactory:
    def __init__(self, chains):
        self.chains = list(chains)
        self.created = []

    def create_processing_chain(self):
        chain = self.chains.pop(0)
        self.created.append(chain)
        return chain


@pytest.fixture
def chain():
    return FakeChain()


@pytest.fixture
def patch(chain):
    return Patch(FakeFactory([chain, FakeChain()]))


def test_defaults(patch):
    assert patch.bank == 0
    assert patch.program == 0
    assert patch.has_bank_and_program is False
    assert patch.name == "Untitled Patch"


def test_convert_to_json(patch, chain):
    patch.bank = 42
    patch.program = 43
    patch.name = "Awesome patch"

    mock_chain_json = {"objectType": "mockChain", "someProperty": 42}
    chain.to_json_result = mock_chain_json

    converted = patch.to_json()
    assert converted["bank"] == 42
    assert converted["program"] == 43
    assert converted["hasBankAndProgram"] is True
    assert converted["name"] == "Awesome patch"
    assert converted["processingChain"] == mock_chain_json
    assert converted["objectType"] == "Patch"


def test_convert_from_json(patch, chain):
    mock_chain_json = {"objectType": "mockChain", "someProperty": 42}
    j = {
        "processingChain": mock_chain_json,
        "bank": 42,
        "program": 43,
        "hasBankAndProgram": True,
        "name": "Awesome patch",
    }

    patch.from_json(j)

    assert ("from_json", mock_chain_json) in chain.calls
    assert patch.bank == 42
    assert patch.program == 43
    assert patch.has_bank_and_program is True
    assert patch.name == "Awesome patch"
    assert patch.processing_chain is chain


def test_convert_from_json_without_chain_resets_chain():
    first, second = FakeChain(), FakeChain()
    factory = FakeFactory([first, second])
    patch = Patch(factory)

    patch.from_json({"name": "x"})

    assert patch.processing_chain is second
    assert patch.name == "x"
    assert factory.created == [first, second]


def test_activate(patch, chain):
    patch.activate()
    assert patch.processing_chain is chain
    assert patch.processing_chain.calls == [("activate",)]


def test_deactivate(patch, chain):
    patch.deactivate()
    assert patch.processing_chain is chain
    assert patch.processing_chain.calls == [("deactivate",)]


def test_execute(patch, chain):
    strip = [Rgb(0, 0, 0)]
    value_after_processing = Rgb(1, 2, 3)
    assert strip[0] != value_after_processing

    def process(target):
        target[0] = value_after_processing

    chain.on_execute = process
    note_map = {42: 42}

    patch.execute(strip, note_map)

    assert strip[0] == value_after_processing
    assert chain.calls == [("execute", {42: 42})]


def test_set_program_marks_bank_and_program_valid(patch):
    patch.program = 5
    assert patch.has_bank_and_program is True
    patch.clear_bank_and_program()
    assert patch.has_bank_and_program is False
    assert patch.program == 5


def test_set_bank_does_not_mark_valid(patch):
    patch.bank = 7
    assert patch.has_bank_and_program is False
    assert patch.bank == 7


def test_bank_out_of_range(patch):
    with pytest.raises(ValueError):
        patch.bank = 256
    assert patch.bank == 0


def test_program_wrong_type(patch):
    with pytest.raises(TypeError):
        patch.program = "1"
    assert patch.program == 0
    assert patch.has_bank_and_program is False


def test_from_json_ignores_wrong_types(patch):
    patch.from_json({"bank": "high", "name": 3, "processingChain": {}})
    assert patch.bank == 0
    assert patch.name == "Untitled Patch"