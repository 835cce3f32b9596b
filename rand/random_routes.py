import random
import sqlite3
from pathlib import Path

# -----------------------------
# Configuration
# -----------------------------
ROUTES_PER_AIRPORT_RANGE = (2, 6)
random.seed(2137)

# (id, iata, icao, name, city, country, latitude, longitude)
AIRPORTS = [
    (1, "ATL", "KATL", "Hartsfield-Jackson Atlanta", "Atlanta", "United States", 33.6407, -84.4277),
    (2, "LAX", "KLAX", "Los Angeles International", "Los Angeles", "United States", 33.9416, -118.4085),
    (3, "ORD", "KORD", "O'Hare International", "Chicago", "United States", 41.9742, -87.9073),
    (4, "JFK", "KJFK", "John F. Kennedy International", "New York", "United States", 40.6413, -73.7781),
    (5, "SFO", "KSFO", "San Francisco International", "San Francisco", "United States", 37.6213, -122.3790),
    (6, "SEA", "KSEA", "Seattle-Tacoma International", "Seattle", "United States", 47.4502, -122.3088),
    (7, "MIA", "KMIA", "Miami International", "Miami", "United States", 25.7959, -80.2870),
    (8, "LHR", "EGLL", "Heathrow", "London", "United Kingdom", 51.4700, -0.4543),
    (9, "CDG", "LFPG", "Charles de Gaulle", "Paris", "France", 49.0097, 2.5479),
    (10, "FRA", "EDDF", "Frankfurt am Main", "Frankfurt", "Germany", 50.0379, 8.5622),
    (11, "MAD", "LEMD", "Adolfo Suarez Madrid-Barajas", "Madrid", "Spain", 40.4983, -3.5676),
    (12, "WAW", "EPWA", "Warsaw Chopin", "Warsaw", "Poland", 52.1657, 20.9671),
    (13, "DXB", "OMDB", "Dubai International", "Dubai", "United Arab Emirates", 25.2532, 55.3657),
    (14, "SIN", "WSSS", "Singapore Changi", "Singapore", "Singapore", 1.3644, 103.9915),
    (15, "HND", "RJTT", "Tokyo Haneda", "Tokyo", "Japan", 35.5494, 139.7798),
    (16, "SYD", "YSSY", "Sydney Kingsford Smith", "Sydney", "Australia", -33.9399, 151.1753),
    (17, "GRU", "SBGR", "Sao Paulo/Guarulhos", "Sao Paulo", "Brazil", -23.4356, -46.4731),
    (18, "JNB", "FAOR", "O. R. Tambo International", "Johannesburg", "South Africa", -26.1392, 28.2460),
    (19, None, "EPMO", "Warsaw Modlin", "Warsaw", "Poland", 52.4511, 20.6518),
]

AIRLINES = ["AA", "DL", "UA", "BA", "AF", "LH", "LO", "EK", "SQ", "QF"]

DB_FILE = Path("data/routes.db")


# -----------------------------
# Generate routes
# -----------------------------
routes = []
airport_ids = [a[0] for a in AIRPORTS]

for source_id in airport_ids:
    num_routes = random.randint(*ROUTES_PER_AIRPORT_RANGE)
    destinations = random.sample([a for a in airport_ids if a != source_id], num_routes)

    for destination_id in destinations:
        # Distance is left NULL; the provider computes it from coordinates
        routes.append((source_id, destination_id, random.choice(AIRLINES), None))

# -----------------------------
# SQLite setup
# -----------------------------
DB_FILE.parent.mkdir(parents=True, exist_ok=True)
conn = sqlite3.connect(DB_FILE)
cur = conn.cursor()

cur.execute("DROP TABLE IF EXISTS routes;")
cur.execute("DROP TABLE IF EXISTS airports;")

cur.execute(
    """
CREATE TABLE airports (
    id INTEGER PRIMARY KEY,
    iata TEXT,
    icao TEXT,
    name TEXT,
    city TEXT,
    country TEXT,
    latitude REAL,
    longitude REAL
);
"""
)

cur.execute(
    """
CREATE TABLE routes (
    source_id INTEGER REFERENCES airports(id),
    destination_id INTEGER REFERENCES airports(id),
    airline TEXT,
    distance REAL
);
"""
)

cur.execute("CREATE INDEX idx_routes_source ON routes(source_id);")

# -----------------------------
# Insert data
# -----------------------------
cur.executemany("INSERT INTO airports VALUES (?, ?, ?, ?, ?, ?, ?, ?);", AIRPORTS)
cur.executemany("INSERT INTO routes VALUES (?, ?, ?, ?);", routes)

conn.commit()
conn.close()

print(f"Generated {len(AIRPORTS)} airports and {len(routes)} routes")
print(f"Saved to SQLite database '{DB_FILE}'")
