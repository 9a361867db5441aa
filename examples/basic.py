import logging

import latlon

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    geohash = latlon.encode(52.205, 0.119, precision=7)
    logger.info("encoded 52.205,0.119 -> %s", geohash)

    point = latlon.decode(geohash)
    box = latlon.bounds(geohash)
    logger.info("decoded %s -> %s within %s .. %s", geohash, point, box.sw, box.ne)

    for direction, cell in latlon.neighbours(geohash).items():
        logger.info("%-2s %s", direction.value, cell)

    inferred = latlon.encode(point.lat, point.lon)
    logger.info("shortest geohash for %s is %s", point, inferred)


if __name__ == "__main__":
    main()
