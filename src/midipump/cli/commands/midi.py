"""MIDI command implementations."""

import logging
import time
from collections.abc import Callable
from datetime import datetime
from typing import Optional

import click

from midipump.exceptions import MidiPumpError
from midipump.midi import MidiInput, MidiOutput
from midipump.protocol import StatusType, packet_length
from midipump.transport import MidoTransport

from ..errors import exit_with_error, parse_port

logger = logging.getLogger(__name__)

# Hidden by --filter-clock
NOISY_STATUSES = (StatusType.CLOCK, StatusType.ACTIVE_SENSE)


def _status_name(status) -> str:
    if isinstance(status, StatusType):
        return status.name.lower()
    return f"0x{int(status):02X}"


def _transport(ctx) -> MidoTransport:
    return MidoTransport(backend=ctx.obj["config"].backend)


@click.command(name="list")
@click.pass_context
def list_ports(ctx):
    """List available MIDI ports."""
    transport = _transport(ctx)
    try:
        inputs = MidiInput.device_list(transport)
        outputs = MidiOutput.device_list(transport)
    except MidiPumpError as e:
        exit_with_error(e)

    click.echo(f"MIDI Input Ports ({len(inputs)}):\n")
    if not inputs:
        click.echo("  No MIDI input ports found.")
    for i, port in enumerate(inputs):
        click.echo(f"  [{i}] {port}")

    click.echo(f"\nMIDI Output Ports ({len(outputs)}):\n")
    if not outputs:
        click.echo("  No MIDI output ports found.")
    for i, port in enumerate(outputs):
        click.echo(f"  [{i}] {port}")


def register_printers(midi_in: MidiInput, echo: Callable[[str], None], filter_clock: bool) -> None:
    """Register a handler for every fixed-arity status that echoes each message."""
    def on_note(on: bool, channel: int, number: int, velocity: int):
        kind = "note_on" if on else "note_off"
        echo(f"{kind} channel={channel} note={number} velocity={velocity}")

    def make_handler3(status):
        def handler(channel, data1, data2):
            echo(f"{_status_name(status)} channel={channel} data={data1},{data2}")
        return handler

    def make_handler2(status):
        def handler(channel, data1):
            echo(f"{_status_name(status)} channel={channel} data={data1}")
        return handler

    def on_system(status):
        echo(_status_name(status))

    for status in StatusType:
        length = packet_length(status)
        if status in (StatusType.NOTE_ON, StatusType.NOTE_OFF):
            continue
        if length == 3:
            midi_in.register_3byte(status, make_handler3(status))
        elif length == 2:
            midi_in.register_2byte(status, make_handler2(status))
        elif length == 1 and not (filter_clock and status in NOISY_STATUSES):
            midi_in.register_1byte(status, on_system)

    midi_in.register_note(on_note)


@click.command(name="monitor")
@click.argument("port", required=False)
@click.option(
    "--filter-clock/--no-filter-clock",
    default=None,
    help="Hide clock and active sense messages (default: from config)",
)
@click.option(
    "--duration",
    type=click.FloatRange(min=0),
    default=None,
    help="Stop after this many seconds (default: run until Ctrl+C)",
)
@click.pass_context
def monitor(ctx, port: Optional[str], filter_clock: Optional[bool], duration: Optional[float]):
    """
    Print incoming MIDI messages from one input port.

    PORT is a port name or index; defaults to the configured input, or
    port 0. Press Ctrl+C to stop.
    """
    config = ctx.obj["config"]
    if filter_clock is None:
        filter_clock = config.filter_clock
    identifier = parse_port(port) if port is not None else config.default_input
    if identifier is None:
        identifier = 0

    try:
        midi_in = MidiInput(identifier, _transport(ctx))
    except MidiPumpError as e:
        exit_with_error(e)

    def echo(text: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        click.echo(f"[{timestamp}] {text}")

    realtime_count = 0

    def on_realtime(status):
        nonlocal realtime_count
        realtime_count += 1

    register_printers(midi_in, echo, filter_clock)
    midi_in.register_realtime(on_realtime)

    click.echo(f"Monitoring {midi_in.name}")
    if filter_clock:
        click.echo("Filtering: clock and active sense (use --no-filter-clock to show all)")
    click.echo("Press Ctrl+C to stop\n")

    deadline = time.monotonic() + duration if duration is not None else None
    try:
        with midi_in:
            while deadline is None or time.monotonic() < deadline:
                midi_in.pump()
                time.sleep(config.poll_interval)
    except KeyboardInterrupt:
        click.echo("\nStopping monitor...")
    except MidiPumpError as e:
        exit_with_error(e)

    click.echo(f"Realtime messages received: {realtime_count}")


# send

def _open_output(ctx, port: Optional[str]) -> MidiOutput:
    config = ctx.obj["config"]
    identifier = parse_port(port) if port is not None else config.default_output
    if identifier is None:
        identifier = 0
    return MidiOutput(identifier, _transport(ctx))


def _channel(ctx, channel: Optional[int]) -> int:
    return ctx.obj["config"].default_channel if channel is None else channel


channel_option = click.option(
    "--channel", "-c",
    type=click.IntRange(0, 15),
    default=None,
    help="MIDI channel 0-15 (default: from config)",
)
port_argument = click.argument("port", required=False)
port_option = click.option(
    "--port", "-p", "port_flag",
    default=None,
    help="Same as PORT",
)


@click.group(name="send")
def send_group():
    """Send MIDI messages to an output port."""
    pass


@send_group.command(name="note")
@port_argument
@port_option
@channel_option
@click.option("--number", "-n", type=int, required=True, help="Note number (clamped to 0-127)")
@click.option("--velocity", type=int, default=100, help="Velocity (clamped to 0-127)")
@click.option("--off", is_flag=True, help="Send note off instead of note on")
@click.pass_context
def send_note(ctx, port, port_flag, channel, number, velocity, off):
    """
    Send a note on (or note off).

    PORT is an output port name or index; defaults to the configured
    output, or port 0.
    """
    try:
        with _open_output(ctx, port or port_flag) as midi_out:
            midi_out.send_note(not off, _channel(ctx, channel), number, velocity)
            click.echo(f"Sent note {'off' if off else 'on'} {number} to {midi_out.name}")
    except MidiPumpError as e:
        exit_with_error(e)


@send_group.command(name="cc")
@port_argument
@port_option
@channel_option
@click.option("--number", "-n", type=int, required=True, help="Controller number (clamped to 0-127)")
@click.option("--value", type=int, required=True, help="Value (clamped to 0-127)")
@click.pass_context
def send_cc(ctx, port, port_flag, channel, number, value):
    """Send a control change."""
    try:
        with _open_output(ctx, port or port_flag) as midi_out:
            midi_out.send_cc(_channel(ctx, channel), number, value)
            click.echo(f"Sent CC {number}={value} to {midi_out.name}")
    except MidiPumpError as e:
        exit_with_error(e)


@send_group.command(name="nrpn")
@port_argument
@port_option
@channel_option
@click.option("--number", "-n", type=int, required=True, help="Parameter number (clamped to 0-16383)")
@click.option("--value", type=int, required=True, help="Value (clamped to 0-16383)")
@click.pass_context
def send_nrpn(ctx, port, port_flag, channel, number, value):
    """Send a 14-bit NRPN parameter change (CC 99, 98, 6, 38)."""
    try:
        with _open_output(ctx, port or port_flag) as midi_out:
            midi_out.send_nrpn(_channel(ctx, channel), number, value)
            click.echo(f"Sent NRPN {number}={value} to {midi_out.name}")
    except MidiPumpError as e:
        exit_with_error(e)
