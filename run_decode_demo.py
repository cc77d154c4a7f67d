import json
from id_config import config
from id_scanner import scan_id_number

config.configure_logging()

# Sample ID numbers (replace with the numbers to check)
samples = [
    ("0507112100245", "SWZ"),
    ("9402285008081", "ZAF"),
    ("9402285008080", "ZAF"),
]

for id_number, country in samples:
    result = scan_id_number(id_number, country_code=country)
    print(json.dumps(result, indent=2))
