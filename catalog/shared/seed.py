"""
Seed data for the content catalog

The repository is volatile, so every process starts from this sample set
and/or a JSON seed file (a list of create payloads).
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .repositories import ContentRepository, InvalidPayloadError

logger = logging.getLogger(__name__)

_IMG_A = "https://images.unsplash.com/photo-1594736797933-d0501ba2fe65?ixlib=rb-4.0.3&auto=format&fit=crop"
_IMG_B = "https://images.unsplash.com/photo-1578662996442-48f60103fc96?ixlib=rb-4.0.3&auto=format&fit=crop"
_IMG_C = "https://images.unsplash.com/photo-1574267432553-4b4628081c31?ixlib=rb-4.0.3&auto=format&fit=crop"

SAMPLE_CONTENTS: List[Dict[str, Any]] = [
    {
        "title": "Scam 1992: The Harshad Mehta Story",
        "original_title": "स्कैम 1992",
        "description": "Based on the real story of stockbroker Harshad Mehta and India's 1992 financial scam.",
        "synopsis": (
            "The series chronicles the life and crimes of Harshad Mehta, a stockbroker who "
            "single-handedly took the stock market to dizzying heights and his catastrophic downfall."
        ),
        "genre": ["Biographical", "Crime", "Drama"],
        "year": "2020",
        "country": "India",
        "rating": "9.2",
        "image_url": f"{_IMG_A}&w=400&h=600",
        "poster_url": f"{_IMG_A}&w=300&h=450",
        "background_url": f"{_IMG_A}&w=1200&h=675",
        "type": "drama",
        "status": "completed",
        "episodes": "10",
        "duration": "50 minutes",
        "language": "Hindi",
        "director": ["Hansal Mehta"],
        "writer": ["Sucheta Dalal", "Debashish Irengbam"],
        "cast": ["Pratik Gandhi", "Shreya Dhanwanthary", "Hemant Kher"],
        "network": "SonyLIV",
        "aired": "October 9, 2020",
        "tags": ["Financial Crime", "Biography", "Indian"],
        "content_rating": "TV-MA",
        "awards": ["Filmfare OTT Awards"],
        "trivia": ["Based on the book by Sucheta Dalal and Debashish Irengbam"],
        "quotes": [],
        "soundtrack": [],
        "created_by": "admin",
    },
    {
        "title": "Sacred Games",
        "description": "A Netflix original series that follows a troubled police officer and a criminal mastermind in Mumbai.",
        "genre": ["Crime", "Thriller"],
        "year": "2018-2019",
        "country": "India",
        "rating": "8.7",
        "image_url": f"{_IMG_B}&w=400&h=600",
        "type": "drama",
        "language": "Hindi",
    },
    {
        "title": "Squid Game",
        "description": "Hundreds of cash-strapped players accept a strange invitation to compete in children's games.",
        "genre": ["Thriller", "Horror"],
        "year": "2021",
        "country": "South Korea",
        "rating": "8.0",
        "image_url": f"{_IMG_A}&w=400&h=600",
        "type": "drama",
        "language": "Korean",
    },
    {
        "title": "Money Heist (La Casa de Papel)",
        "description": "An unusual group of robbers attempt to carry out the most perfect robbery in Spanish history.",
        "genre": ["Crime", "Drama"],
        "year": "2017-2021",
        "country": "Spain",
        "rating": "8.3",
        "image_url": f"{_IMG_C}&w=400&h=600",
        "type": "drama",
        "language": "Spanish",
    },
    {
        "title": "3 Idiots",
        "description": "Two friends searching for their long lost companion. They revisit their college days.",
        "genre": ["Comedy", "Drama"],
        "year": "2009",
        "country": "India",
        "rating": "8.4",
        "image_url": f"{_IMG_C}&w=400&h=600",
        "type": "movie",
        "language": "Hindi",
    },
    {
        "title": "Your Name (Kimi no Na wa)",
        "description": "Two teenagers share a profound, magical connection upon discovering they are swapping bodies.",
        "genre": ["Animation", "Romance"],
        "year": "2016",
        "country": "Japan",
        "rating": "8.2",
        "image_url": f"{_IMG_B}&w=400&h=600",
        "type": "movie",
        "language": "Japanese",
    },
    {
        "title": "Breaking Bad",
        "description": "A chemistry teacher turned methamphetamine manufacturer partners with a former student.",
        "genre": ["Crime", "Drama"],
        "year": "2008-2013",
        "country": "USA",
        "rating": "9.5",
        "image_url": f"{_IMG_A}&w=400&h=600",
        "type": "drama",
        "language": "English",
    },
    {
        "title": "2gether: The Series",
        "description": "A student asks a popular guy to pretend to be his boyfriend to ward off unwanted attention.",
        "genre": ["Romance", "Youth"],
        "year": "2020",
        "country": "Thailand",
        "rating": "7.8",
        "image_url": f"{_IMG_A}&w=400&h=600",
        "type": "drama",
        "language": "Thai",
    },
    {
        "title": "The Crown",
        "description": "Follows the political rivalries and romance of Queen Elizabeth II's reign.",
        "genre": ["Biography", "Drama"],
        "year": "2016-2023",
        "country": "UK",
        "rating": "8.6",
        "image_url": f"{_IMG_C}&w=400&h=600",
        "type": "drama",
        "language": "English",
    },
    {
        "title": "Meteor Garden",
        "description": "An ordinary girl gets accepted into an elite school where she encounters the F4.",
        "genre": ["Romance", "Youth"],
        "year": "2018",
        "country": "China",
        "rating": "7.2",
        "image_url": f"{_IMG_B}&w=400&h=600",
        "type": "drama",
        "language": "Mandarin",
    },
    {
        "title": "Mumbai Diaries 26/11",
        "description": "Medical drama series based on the 2008 Mumbai attacks.",
        "genre": ["Medical", "Drama"],
        "year": "2021",
        "country": "India",
        "rating": "8.9",
        "image_url": f"{_IMG_A}&w=400&h=600",
        "type": "drama",
        "language": "Hindi",
    },
    {
        "title": "Parasite",
        "description": "A poor family schemes to become employed by a wealthy family.",
        "genre": ["Thriller"],
        "year": "2019",
        "country": "South Korea",
        "rating": "8.5",
        "image_url": f"{_IMG_B}&w=400&h=600",
        "type": "movie",
        "language": "Korean",
    },
]


def load_seed_file(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Read a JSON array of content payloads"""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {path}")

    logger.info(f"Loading seed contents from {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Seed file {path} must contain a JSON array, got {type(data).__name__}")
    return data


def seed_repository(repository: ContentRepository, entries: Iterable[Dict[str, Any]]) -> int:
    """Create every valid entry; invalid ones are logged and skipped"""
    created = 0
    for position, entry in enumerate(entries):
        try:
            repository.create_content(entry)
            created += 1
        except InvalidPayloadError as e:
            logger.warning(f"❌ Skipping seed entry #{position}: {e} {e.errors}")
    return created


def build_repository(
    seed_sample_data: bool = True,
    seed_file: Optional[Union[str, Path]] = None,
    repository: Optional[ContentRepository] = None,
) -> ContentRepository:
    """Construct a repository and populate it from the configured sources"""
    repository = repository or ContentRepository()

    if seed_sample_data:
        count = seed_repository(repository, SAMPLE_CONTENTS)
        logger.info(f"Seeded {count} sample contents")

    if seed_file:
        count = seed_repository(repository, load_seed_file(seed_file))
        logger.info(f"✅ Seeded {count} contents from {seed_file}")

    return repository
