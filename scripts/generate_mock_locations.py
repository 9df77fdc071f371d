import numpy as np
import pandas as pd
import os

CATEGORIES = [
    {"id": "food", "label": "Food & Drink", "color": "#f97316"},
    {"id": "health", "label": "Health", "color": "#ef4444"},
    {"id": "transit", "label": "Transit", "color": "#3b82f6"},
    {"id": "shopping", "label": "Shopping", "color": "#a855f7"},
    {"id": "park", "label": "Parks", "color": "#22c55e"},
]

TAGS = [
    {"id": "open-late", "name": "Open late"},
    {"id": "wheelchair", "name": "Wheelchair accessible"},
    {"id": "parking", "name": "Parking"},
    {"id": "family", "name": "Family friendly"},
    {"id": "wifi", "name": "Free Wi-Fi"},
]

STREETS = ["MG Road", "Park Street", "Station Road", "Lake View", "Market Lane", "Temple Street"]


def generate_mock_locations(num_locations=40, output_dir="sampledata", seed=7):
    """
    Generates points of interest scattered around a city centre so the
    route planner has short (rickshaw base fare) and long trips to work with.
    """
    # Center around Bengaluru (fares are in rupees)
    CENTER_LAT = 12.971599
    CENTER_LON = 77.594566

    rng = np.random.default_rng(seed)
    rows = []
    for index in range(num_locations):
        category = CATEGORIES[rng.integers(len(CATEGORIES))]
        # roughly within ~8km (0.07 degrees)
        lat = CENTER_LAT + rng.uniform(-0.07, 0.07)
        lon = CENTER_LON + rng.uniform(-0.07, 0.07)
        tag_count = rng.integers(0, 3)
        tags = rng.choice([tag["id"] for tag in TAGS], size=tag_count, replace=False)

        rows.append({
            "id": f"loc_{str(index + 1).zfill(3)}",
            "name": f"{category['label'].split(' ')[0]} spot {index + 1}",
            "address": f"{rng.integers(1, 200)} {STREETS[rng.integers(len(STREETS))]}, Bengaluru",
            "lat": np.round(lat, 6),
            "lon": np.round(lon, 6),
            "category_id": category["id"],
            "tags": ";".join(sorted(tags)),
        })

    os.makedirs(output_dir, exist_ok=True)
    pd.DataFrame(rows).to_csv(os.path.join(output_dir, "locations.csv"), index=False)
    pd.DataFrame(CATEGORIES).to_csv(os.path.join(output_dir, "categories.csv"), index=False)
    pd.DataFrame(TAGS).to_csv(os.path.join(output_dir, "tags.csv"), index=False)
    print(f"✅ Generated {num_locations} locations in '{output_dir}'")

    print("\nLocations per category:")
    counts = pd.DataFrame(rows)["category_id"].value_counts()
    for name, count in counts.items():
        print(f"  {name}: {count}")


if __name__ == "__main__":
    generate_mock_locations()
