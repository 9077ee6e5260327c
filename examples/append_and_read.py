#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from evstore.client import (
    ConnectionSettings,
    EventStoreHttpConnection,
    ExpectedVersion,
    NewEventData,
    StreamPosition,
    StreamReadStatus,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Append events to a stream and read them back")
    p.add_argument("stream", nargs="?", default="example-orders")
    p.add_argument("--endpoint", default="http://127.0.0.1:2113")
    p.add_argument("--username", default="admin")
    p.add_argument("--password", default="changeit")
    p.add_argument("--count", type=int, default=3)
    return p.parse_args()


def on_error(connection: EventStoreHttpConnection, exc: BaseException) -> None:
    print(f"[{connection.connection_name}] decode failure: {exc}")


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    settings = (
        ConnectionSettings(connection_name="example")
        .with_credentials(args.username, args.password)
        .with_timeout(10)
        .with_error_handler(on_error)
    )

    async with EventStoreHttpConnection.create(args.endpoint, settings) as connection:
        events = [
            NewEventData(event_type="OrderPlaced", data={"order_id": f"o-{n}", "total": n * 10})
            for n in range(args.count)
        ]
        await connection.append_to_stream(args.stream, ExpectedVersion.ANY, *events)

        head = await connection.read_event(args.stream, StreamPosition.END)
        number = head.event.event_number if head.event else "-"
        print(f"Head of {args.stream}: {head.status.value} #{number}")

        page = await connection.read_stream_events_backward(args.stream, StreamPosition.END, 20)
        if page.status != StreamReadStatus.SUCCESS:
            print(f"Stream unavailable: {page.status.value}")
            return
        print(f"{'#':>5} | {'Type':20} | Data")
        print("-" * 60)
        for event in page.entries:
            print(f"{event.event_number:>5} | {event.event_type or '':20} | {event.data}")


if __name__ == "__main__":
    asyncio.run(main())
