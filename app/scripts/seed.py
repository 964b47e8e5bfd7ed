"""
Populate the catalog with sample movies, actors and cast. Run from project root:
  python -m app.scripts.seed [--reset]
Without --reset the script does nothing if movies already exist.
"""
import argparse
import sys
from datetime import date

from sqlmodel import Session, select

from app.core.logging import get_logger, setup_logging
from app.db.session import create_db_and_tables, engine
from app.models.actor import Actor, Cast
from app.models.movie import Movie

logger = get_logger(__name__)

SAMPLE_MOVIES = [
    {
        "title": "Inception",
        "release_date": date(2010, 7, 16),
        "genres": ["Sci-Fi", "Action", "Thriller"],
        "duration": 148,
        "trending": True,
        "rating": 8.8,
        "description": "A mind-bending thriller about dreams",
        "classification": "PG-13",
    },
    {
        "title": "The Dark Knight",
        "release_date": date(2008, 7, 18),
        "genres": ["Action", "Crime", "Drama"],
        "duration": 152,
        "trending": True,
        "rating": 9.0,
        "description": "Batman faces the Joker in this epic crime thriller",
        "classification": "PG-13",
    },
    {
        "title": "Interstellar",
        "release_date": date(2014, 11, 7),
        "genres": ["Science Fiction", "Drama", "Adventure"],
        "duration": 169,
        "trending": False,
        "rating": 8.6,
        "description": "A team of explorers travel through a wormhole in space",
        "classification": "PG-13",
    },
]

# (first_name, last_name, nick_name, birthdate, popularity)
SAMPLE_ACTORS = [
    ("Leonardo", "DiCaprio", "Leo", date(1974, 11, 11), 95.5),
    ("Cillian", "Murphy", "Cillian", date(1976, 5, 25), 85.2),
    ("Joseph", "Gordon-Levitt", "Joe", date(1981, 2, 17), 82.3),
    ("Tom", "Hardy", "Tom", date(1977, 9, 15), 88.7),
    ("Christian", "Bale", None, date(1974, 1, 30), 92.1),
    ("Heath", "Ledger", None, date(1979, 4, 4), 90.0),
    ("Gary", "Oldman", None, date(1958, 3, 21), 87.5),
    ("Aaron", "Eckhart", None, date(1968, 3, 12), 75.8),
    ("Matthew", "McConaughey", "Matt", date(1969, 11, 4), 89.3),
    ("Anne", "Hathaway", None, date(1982, 11, 12), 86.4),
    ("Jessica", "Chastain", None, date(1977, 3, 24), 84.6),
    ("Timothee", "Chalamet", None, date(1995, 12, 27), 91.2),
]

# (movie index, actor index, role, characters)
SAMPLE_CAST = [
    (0, 0, "Lead", ["Dom Cobb"]),
    (0, 1, "Support", ["Robert Fisher"]),
    (0, 2, "Support", ["Arthur"]),
    (0, 3, "Support", ["Eames"]),
    (1, 4, "Lead", ["Bruce Wayne", "Batman"]),
    (1, 5, "Antagonist", ["Joker"]),
    (1, 6, "Support", ["James Gordon"]),
    (1, 7, "Antagonist", ["Harvey Dent", "Two-Face"]),
    (2, 8, "Lead", ["Joseph Cooper"]),
    (2, 9, "Support", ["Amelia Brand"]),
    (2, 10, "Support", ["Murph Cooper"]),
    (2, 11, "Support", ["Tom Cooper"]),
]


def clear_catalog(session: Session) -> None:
    """Delete all cast entries, movies and actors."""
    for model in (Cast, Movie, Actor):
        for row in list(session.exec(select(model))):
            session.delete(row)
    session.commit()


def seed_catalog(session: Session) -> dict[str, int]:
    """
    Insert the sample data unless movies already exist.

    Returns:
        Number of rows created per table (all zero when skipped)
    """
    if session.exec(select(Movie)).first() is not None:
        logger.info("Catalog already has movies; skipping seed")
        return {"movies": 0, "actors": 0, "cast": 0}

    movies = [Movie(**data) for data in SAMPLE_MOVIES]
    actors = [
        Actor(
            first_name=first,
            last_name=last,
            nick_name=nick,
            birthdate=born,
            popularity=popularity,
        )
        for first, last, nick, born, popularity in SAMPLE_ACTORS
    ]
    session.add_all(movies + actors)
    session.flush()

    cast = [
        Cast(
            movie_id=movies[m].id,  # type: ignore[arg-type]
            actor_id=actors[a].id,  # type: ignore[arg-type]
            role=role,
            characters=characters,
        )
        for m, a, role, characters in SAMPLE_CAST
    ]
    session.add_all(cast)
    session.commit()

    counts = {"movies": len(movies), "actors": len(actors), "cast": len(cast)}
    logger.info(f"Seeded catalog: {counts}")
    return counts


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the movie catalog with sample data.")
    parser.add_argument("--reset", action="store_true", help="Delete existing catalog data first")
    args = parser.parse_args()

    setup_logging()
    create_db_and_tables()
    with Session(engine) as session:
        if args.reset:
            clear_catalog(session)
        counts = seed_catalog(session)

    print(
        f"Created {counts['movies']} movies, {counts['actors']} actors, "
        f"{counts['cast']} cast entries."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
