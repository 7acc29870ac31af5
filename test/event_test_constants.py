# Event test constants to eliminate duplication across test files

ORGANIZER_ID = 'organizer-1'
OTHER_USER_ID = 'someone-else'

DEFAULT_EVENT_TITLE = 'Summer Concert'
DEFAULT_CITY = 'Tunis'
DEFAULT_COUNTRY = 'Tunisia'

# (latitude, longitude); about 16 km apart
TUNIS_COORDINATES = (36.8065, 10.1815)
SIDI_BOU_SAID_COORDINATES = (36.8687, 10.3416)
