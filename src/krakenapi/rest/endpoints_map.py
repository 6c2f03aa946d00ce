mapping = {
        #! exchanges need to be in title format
        "Kraken": {
                    #! Do not include version in base url as we need to include it in the hmac sig
                    "base_url": "https://api.kraken.com",
                    "version": 0,

                    "public_methods": {
                        "time": "Time",
                        "assets": "Assets",
                        "tradable_pairs": "AssetPairs",
                        "ticker": "Ticker",
                        "ohlc": "OHLC",
                        "orderbook": "Depth",
                        "trades": "Trades",
                        "spread": "Spread",
                    },

                    "private_methods": {
                        "account_balance": "Balance",
                        "trade_balance": "TradeBalance",
                        "open_positions": "OpenPositions",
                        "open_orders": "OpenOrders",
                        "closed_orders": "ClosedOrders",
                        "trades_history": "TradesHistory",
                        "ledger": "Ledgers",
                        "order_info": "QueryOrders",
                        "trades_info": "QueryTrades",
                        "ledger_info": "QueryLedgers",
                        "volume": "TradeVolume",
                        "place_order": "AddOrder",
                        "cancel_order": "CancelOrder",
                        "deposit_methods": "DepositMethods",
                        "deposit_addresses": "DepositAddresses",
                        "deposit_status": "DepositStatus",
                        "withdraw_info": "WithdrawInfo",
                        "withdraw": "Withdraw",
                        "withdraw_status": "WithdrawStatus",
                        "withdraw_cancel": "WithdrawCancel",
                        "ws_token": "GetWebSocketsToken",
                    }
                },
        }
