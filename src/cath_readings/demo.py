"""A fixed offline record: the readings for December 15, 2025."""

from __future__ import annotations

from .models import ADVENT, FERIAL, DailyReadings, Reading

_NUMBERS = (
    "When Balaam raised his eyes and saw Israel encamped, tribe by tribe,\n"
    "the spirit of God came upon him,\n"
    "and he gave voice to his oracle:\n"
    "\n"
    "The utterance of Balaam, son of Beor,\n"
    "the utterance of a man whose eye is true,\n"
    "The utterance of one who hears what God says,\n"
    "and knows what the Most High knows,\n"
    "Of one who sees what the Almighty sees,\n"
    "enraptured, and with eyes unveiled:\n"
    "How goodly are your tents, O Jacob;\n"
    "your encampments, O Israel!\n"
    "They are like gardens beside a stream,\n"
    "like the cedars planted by the LORD.\n"
    "His wells shall yield free-flowing waters,\n"
    "he shall have the sea within reach;\n"
    "His king shall rise higher,\n"
    "and his royalty shall be exalted.\n"
    "\n"
    "Then Balaam gave voice to his oracle:\n"
    "\n"
    "The utterance of Balaam, son of Beor,\n"
    "the utterance of the man whose eye is true,\n"
    "The utterance of one who hears what God says,\n"
    "and knows what the Most High knows,\n"
    "Of one who sees what the Almighty sees,\n"
    "enraptured, and with eyes unveiled.\n"
    "I see him, though not now;\n"
    "I behold him, though not near:\n"
    "A star shall advance from Jacob,\n"
    "and a staff shall rise from Israel."
)

_PSALM = (
    "R.(4) Teach me your ways, O Lord.\n"
    "Your ways, O LORD, make known to me;\n"
    "teach me your paths,\n"
    "Guide me in your truth and teach me,\n"
    "for you are God my savior.\n"
    "R. Teach me your ways, O Lord.\n"
    "Remember that your compassion, O LORD,\n"
    "and your kindness are from of old.\n"
    "In your kindness remember me,\n"
    "because of your goodness, O LORD.\n"
    "R. Teach me your ways, O Lord.\n"
    "Good and upright is the LORD;\n"
    "thus he shows sinners the way.\n"
    "He guides the humble to justice,\n"
    "he teaches the humble his way.\n"
    "R. Teach me your ways, O Lord."
)

_ALLELUIA = (
    "R. Alleluia, alleluia.\n"
    "Show us, LORD, your love,\n"
    "and grant us your salvation.\n"
    "R. Alleluia, alleluia."
)

_GOSPEL = (
    "When Jesus had come into the temple area,\n"
    "the chief priests and the elders of the people approached him\n"
    "as he was teaching and said,\n"
    "\"By what authority are you doing these things?\n"
    "And who gave you this authority?\"\n"
    "Jesus said to them in reply,\n"
    "\"I shall ask you one question, and if you answer it for me,\n"
    "then I shall tell you by what authority I do these things.\n"
    "Where was John's baptism from?\n"
    "Was it of heavenly or of human origin?\"\n"
    "They discussed this among themselves and said,\n"
    "\"If we say 'Of heavenly origin,' he will say to us,\n"
    "'Then why did you not believe him?'\n"
    "But if we say, 'Of human origin,' we fear the crowd,\n"
    "for they all regard John as a prophet.\"\n"
    "So they said to Jesus in reply, \"We do not know.\"\n"
    "He himself said to them,\n"
    "\"Neither shall I tell you by what authority I do these things.\""
)

DEMO_READINGS = DailyReadings(
    date="2025-12-15",
    display_date="December 15, 2025",
    title="Monday of the Third Week of Advent",
    season=ADVENT,
    rank=FERIAL,
    lectionary="187",
    readings=(
        Reading(
            name="Reading 1",
            reference="Numbers 24:2-7, 15-17a",
            reference_url="https://bible.usccb.org/bible/numbers/24?2",
            text=_NUMBERS,
        ),
        Reading(
            name="Responsorial Psalm",
            reference="Psalm 25:4-5ab, 6 and 7bc, 8-9",
            reference_url="https://bible.usccb.org/bible/Psalms/25?4",
            text=_PSALM,
        ),
        Reading(
            name="Alleluia",
            reference="Psalm 85:8",
            reference_url="https://bible.usccb.org/bible/Psalms/85?8",
            text=_ALLELUIA,
        ),
        Reading(
            name="Gospel",
            reference="Matthew 21:23-27",
            reference_url="https://bible.usccb.org/bible/matthew/21?23",
            text=_GOSPEL,
        ),
    ),
)


def get_demo_data() -> DailyReadings:
    """Return :data:`DEMO_READINGS`; no network access involved."""

    return DEMO_READINGS


__all__ = ["DEMO_READINGS", "get_demo_data"]
