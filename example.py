from public24 import Public24

print(Public24.__version__)  # 0.1.0

# Settings come from PUBLIC24_* environment variables, defaulting to the public API
app = Public24()

# Live non-cash rates for every currency
print(app.dispatch("current-exchange-rate"))

# Live cash rate for one currency
print(app.dispatch("current-exchange-rate", {"exchange-rate-type": "cash", "ccy": "USD"}))

# Archived rates for a day (cached for the lifetime of ``app``)
print(app.dispatch("exchange-rate-history", {"date": "2024-01-05", "ccy": "EUR"}))

# Five nearest ATMs on a street, as label -> Google Maps link pairs
locations = app.dispatch(
    "infrastructure-location",
    {"infrastructure-type": "atm", "city": "Kyiv", "address": "Khreshchatyk", "limit": 5},
)
print(locations.messages_with_links)

# Raw webhook body in, fulfillment payload out
print(
    app.fulfill(
        {
            "result": {
                "metadata": {"intentName": "exchange-rate-history"},
                "parameters": {"date": "2024-01-05"},
            }
        }
    )["speech"]
)

app.close()
