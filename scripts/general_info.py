#!/usr/bin/env python3
"""
Query the Binance futures general endpoints from the command line.

Usage examples:
  python scripts/general_info.py ping
  python scripts/general_info.py --segment delivery time
  python scripts/general_info.py --segment futures exchange-info
  python scripts/general_info.py --segment delivery --testnet symbol btcusd_perp
"""

import argparse
import asyncio
import sys

from core.config import settings, validate_configuration
from core.errors import BinanceError
from core.utils.time import current_utc_timestamp
from exchanges.binance import SEGMENTS, BinanceAPIClient, GeneralInfoClient


async def run(args: argparse.Namespace) -> int:
    segment = SEGMENTS[args.segment]
    config = settings.model_copy(update={"binance_testnet": True}) if args.testnet else settings
    validate_configuration(config)

    async with BinanceAPIClient.from_settings(segment, config) as client:
        general = GeneralInfoClient(client, segment)

        try:
            if args.command == "ping":
                print(await general.ping())

            elif args.command == "time":
                server_time = await general.get_server_time()
                offset = server_time.server_time - current_utc_timestamp()
                print(f"Server time: {server_time.as_datetime.isoformat()} ({server_time.server_time})")
                print(f"Local clock offset: {offset} ms")

            elif args.command == "exchange-info":
                info = await general.exchange_info()
                print(f"Timezone: {info.timezone}")
                for limit in info.rate_limits:
                    print(f"Rate limit: {limit.rate_limit_type} {limit.limit}/{limit.interval_num} {limit.interval}")
                print(f"Symbols ({len(info.symbols)}):")
                for item in info.symbols:
                    print(f"  {item.symbol}")

            elif args.command == "symbol":
                item = await general.get_symbol_info(args.name)
                print(item.model_dump_json(indent=2))

        except BinanceError as e:
            print(f"[Error] {type(e).__name__}: {e}", file=sys.stderr)
            return 1

    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Query Binance futures general endpoints")
    parser.add_argument("--segment", choices=sorted(SEGMENTS), default="futures",
                        help="Market segment: futures (USDT-M) or delivery (COIN-M)")
    parser.add_argument("--testnet", action="store_true", help="Use the futures testnet")

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("ping", help="Test connectivity")
    commands.add_parser("time", help="Show server time and local clock offset")
    commands.add_parser("exchange-info", help="List rate limits and symbols")
    symbol_parser = commands.add_parser("symbol", help="Show one symbol's trading rules")
    symbol_parser.add_argument("name", help="Symbol name, any case (e.g. btcusdt)")

    args = parser.parse_args()
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n[Info] Interrupted. Bye.")
        sys.exit(0)
