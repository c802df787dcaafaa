import logging

from georedis import GeoClient, GeoKey


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)
    client = GeoClient(url="redis://127.0.0.1:6379/0", bit_depth=52)

    client.add_coordinates(
        "cities",
        GeoKey(lat=43.6667, lon=-79.4167, label="Toronto"),
        GeoKey(lat=39.9523, lon=-75.1638, label="Philadelphia"),
        GeoKey(lat=37.4688, lon=-122.1411, label="Palo Alto"),
        (37.7691, -122.4449, "San Francisco"),
        (47.5500, -52.6667, "St. John's"),
    )

    print(client.search_by_radius("cities", 39.9523, -75.1638, 5000))
    for result in client.search_nearby("cities", 39.9523, -75.1638, 1_000_000):
        print(result.label, round(result.distance))

    client.remove_coordinates_by_keys("cities", "Toronto", "Philadelphia")
    client.close()


if __name__ == "__main__":
    main()
