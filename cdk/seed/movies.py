"""Crew records loaded into ExamTable when the stack is first created.

Keyed by (movieId, role). Kept under the 25 item BatchWriteItem limit so the
whole seed goes out in one call.
"""

MOVIE_CREW = [
    {
        "movieId": 1234,
        "role": "Director",
        "names": "Joe Bloggs",
        "movieTitle": "The Quiet Harbour",
    },
    {
        "movieId": 1234,
        "role": "Producer",
        "names": "Anna Kelly, Liam Walsh",
        "movieTitle": "The Quiet Harbour",
    },
    {
        "movieId": 1234,
        "role": "Writer",
        "names": "Siobhan Byrne",
        "movieTitle": "The Quiet Harbour",
    },
    {
        "movieId": 2345,
        "role": "Director",
        "names": "Wei Zhang",
        "movieTitle": "Lanterns Over the River",
    },
    {
        "movieId": 2345,
        "role": "Camera",
        "names": "Li Na, Chen Jie",
        "movieTitle": "Lanterns Over the River",
    },
    {
        "movieId": 2345,
        "role": "Writer",
        "names": "Wei Zhang, Mei Lin",
        "movieTitle": "Lanterns Over the River",
    },
    {
        "movieId": 3456,
        "role": "Director",
        "names": "Maria Lopez",
        "movieTitle": "Salt Roads",
    },
    {
        "movieId": 3456,
        "role": "Producer",
        "names": "Carlos Ruiz",
        "movieTitle": "Salt Roads",
    },
    {
        "movieId": 4567,
        "role": "Director",
        "names": "Pierre Martin",
        "movieTitle": "Northern Lines",
    },
    {
        "movieId": 4567,
        "role": "Editor",
        "names": "Claire Dubois",
        "movieTitle": "Northern Lines",
    },
]
