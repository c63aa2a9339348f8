"""
Seed fixtures - the ten herb catches written by initLedger.
Stored under keys "1".."10" in table order.
"""

from .schema import HerbRecord

SEED_RECORDS = (
    HerbRecord(name="923F", location="67.0006, -70.5476", timestamp="1504054225", holder="Miriam", family="Some", production="10 kgs"),
    HerbRecord(name="M83T", location="91.2395, -49.4594", timestamp="1504057825", holder="Dave", family="Some", production="10 kgs"),
    HerbRecord(name="T012", location="58.0148, 59.01391", timestamp="1493517025", holder="Igor", family="Some", production="10 kgs"),
    HerbRecord(name="P490", location="-45.0945, 0.7949", timestamp="1496105425", holder="Amalea", family="Some", production="10 kgs"),
    HerbRecord(name="S439", location="-107.6043, 19.5003", timestamp="1493512301", holder="Rafa", family="Some", production="10 kgs"),
    HerbRecord(name="J205", location="-155.2304, -15.8723", timestamp="1494117101", holder="Shen", family="Some", production="10 kgs"),
    HerbRecord(name="S22L", location="103.8842, 22.1277", timestamp="1496104301", holder="Leila", family="Some", production="10 kgs"),
    HerbRecord(name="EI89", location="-132.3207, -34.0983", timestamp="1485066691", holder="Yuan", family="Some", production="10 kgs"),
    HerbRecord(name="129R", location="153.0054, 12.6429", timestamp="1485153091", holder="Carlo", family="Some", production="10 kgs"),
    HerbRecord(name="49W4", location="51.9435, 8.2735", timestamp="1487745091", holder="Fatima", family="Some", production="10 kgs"),
)


def seed_key(index: int) -> str:
    """Store key for the fixture at zero-based index."""
    return str(index + 1)
