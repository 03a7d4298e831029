"""
Exchange Connectors Package

Each exchange has its own subfolder. Currently only Binance futures
(USDT-margined and coin-margined delivery) is implemented:
- api_client.py: REST transport
- markets.py: Market segment definitions
- general.py: Exchange-level read-only queries
"""
