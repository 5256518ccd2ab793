from datetime import date

all_authors = [
    {"key": "rothfuss", "first_name": "Patrick", "family_name": "Rothfuss",
     "date_of_birth": date(1973, 6, 6)},
    {"key": "asimov", "first_name": "Isaac", "family_name": "Asimov",
     "date_of_birth": date(1920, 1, 2), "date_of_death": date(1992, 4, 6)},
    {"key": "bova", "first_name": "Ben", "family_name": "Bova",
     "date_of_birth": date(1932, 11, 8), "date_of_death": date(2020, 11, 29)},
    {"key": "billings", "first_name": "Bob", "family_name": "Billings"},
    {"key": "jones", "first_name": "Jim", "family_name": "Jones",
     "date_of_birth": date(1971, 12, 16)},
]

all_books = [
    {"title": "The Name of the Wind (The Kingkiller Chronicle, #1)", "author": "rothfuss",
     "summary": "I have stolen princesses back from sleeping barrow kings. I burned down the town "
                "of Trebon. I have spent the night with Felurian and left with both my sanity "
                "and my life."},
    {"title": "The Wise Man's Fear (The Kingkiller Chronicle, #2)", "author": "rothfuss",
     "summary": "Picking up the tale of Kvothe Kingkiller once again, we follow him into exile, "
                "into political intrigue, courtship, adventure, love and magic."},
    {"title": "The Slow Regard of Silent Things (Kingkiller Chronicle)", "author": "rothfuss",
     "summary": "Deep below the University, there is a dark place. Few people know of it: a "
                "broken web of ancient passageways and abandoned rooms."},
    {"title": "Apes and Angels", "author": "bova",
     "summary": "Humankind headed out to the stars not for conquest, nor exploration, nor even "
                "for curiosity. Humans went to the stars in a desperate crusade to save "
                "intelligent life wherever they found it."},
    {"title": "Death Wave", "author": "bova",
     "summary": "In Ben Bova's previous novel New Earth, Jordan Kell led the first human mission "
                "beyond the solar system."},
    {"title": "Test Book 1", "author": "billings",
     "summary": "Summary of test book 1"},
    {"title": "Test Book 2", "author": "jones",
     "summary": "Summary of test book 2"},
]
