"""Pytest fixtures for tests."""

from collections import deque
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from midipump.exceptions import TransportError
from midipump.midi import MidiInput, MidiOutput


class FakeInputHandle:
    """Input handle that returns queued messages, then empty lists."""

    def __init__(self, name: str, pending=()):
        self.name = name
        self.queue = deque(list(m) for m in pending)
        self.receive_calls = 0
        self.closed = False

    def feed(self, *messages):
        self.queue.extend(list(m) for m in messages)

    def receive(self):
        self.receive_calls += 1
        if self.queue:
            return self.queue.popleft()
        return []

    def close(self):
        self.closed = True


class FakeOutputHandle:
    """Output handle that records sent messages, optionally failing after N sends."""

    def __init__(self, name: str, fail_after=None):
        self.name = name
        self.sent = []
        self.fail_after = fail_after
        self.closed = False

    def send(self, data):
        if self.fail_after is not None and len(self.sent) >= self.fail_after:
            raise TransportError("device unplugged", operation=f"send to {self.name}")
        self.sent.append(list(data))

    def close(self):
        self.closed = True


class FakeTransport:
    """In-memory MidiTransport."""

    def __init__(self, inputs=("Fake Keyboard", "Fake Pads"), outputs=("Fake Synth", "Fake Drums")):
        self.inputs = list(inputs)
        self.outputs = list(outputs)
        self.pending_input = []
        self.output_fail_after = None
        self.open_error = None
        self.list_error = None
        self.opened_inputs = []
        self.opened_outputs = []

    def list_input_ports(self):
        if self.list_error:
            raise TransportError(self.list_error, operation="list input ports")
        return list(self.inputs)

    def list_output_ports(self):
        if self.list_error:
            raise TransportError(self.list_error, operation="list output ports")
        return list(self.outputs)

    def open_input(self, index):
        self._check_open(self.inputs, index, "input")
        handle = FakeInputHandle(self.inputs[index], self.pending_input)
        self.opened_inputs.append(handle)
        return handle

    def open_output(self, index):
        self._check_open(self.outputs, index, "output")
        handle = FakeOutputHandle(self.outputs[index], self.output_fail_after)
        self.opened_outputs.append(handle)
        return handle

    def _check_open(self, names, index, port_type):
        if self.open_error:
            raise TransportError(self.open_error, operation=f"open {port_type} {index}")
        if not 0 <= index < len(names):
            raise TransportError(f"Invalid {port_type} port number {index}")


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def transport():
    """Create a FakeTransport with two inputs and two outputs."""
    return FakeTransport()


@pytest.fixture
def midi_in(transport):
    """Open input port 0 on the fake transport."""
    return MidiInput(0, transport)


@pytest.fixture
def input_handle(midi_in, transport):
    """The handle behind ``midi_in``."""
    return transport.opened_inputs[0]


@pytest.fixture
def midi_out(transport):
    """Open output port 0 on the fake transport."""
    return MidiOutput(0, transport)


@pytest.fixture
def output_handle(midi_out, transport):
    """The handle behind ``midi_out``."""
    return transport.opened_outputs[0]
