import pytest

CONTINUATION = " " * 37

SAMPLE_LINES = [
    'PDS_VERSION_ID = PDS3',
    '',
    '/* FILE DATA ELEMENTS */',
    '',
    'RECORD_TYPE = FIXED_LENGTH',
    '^IMAGE_HEADER = ("NRB_1.IMG",1)',
    '^IMAGE = ("NRB_1.IMG",13)',
    'SPACECRAFT_CLOCK_START_COUNT = "739187404.000"',
    'MISSION_NAME = "MARS SCIENCE LABORATORY"',
    'DESCRIPTION = "A long description that',
    CONTINUATION + 'continues here"',
    'GROUP = INSTRUMENT_STATE_PARMS',
    '  /* Exposure parameters */',
    '  EXPOSURE_DURATION = 12.5',
    '  DETECTOR_ERASE_COUNT = 3',
    '  FLAT_FIELD_CORRECTION_FLAG = "TRUE"',
    '  INSTRUMENT_MODE_ID = FULL_FRAME',
    'END_GROUP = INSTRUMENT_STATE_PARMS',
    'OBJECT = IMAGE',
    '  LINES = 1024',
    '  LINE_SAMPLES = 1024',
    '  SAMPLE_BIT_MASK = 2#0000111111111111#',
    '  OFFSET = -5',
    'END_OBJECT = IMAGE',
    'END',
]

# PDS labels are CRLF terminated.
SAMPLE_LABEL = "\r\n".join(SAMPLE_LINES) + "\r\n"

SAMPLE_TREE = {
    "PDS_VERSION_ID": "PDS3",
    "RECORD_TYPE": "FIXED_LENGTH",
    "^IMAGE_HEADER": ["NRB_1.IMG", 1],
    "^IMAGE": ["NRB_1.IMG", 13],
    "SPACECRAFT_CLOCK_START_COUNT": "739187404.000",
    "MISSION_NAME": "MARS SCIENCE LABORATORY",
    "DESCRIPTION": "A long description thatcontinues here",
    "INSTRUMENT_STATE_PARMS": {
        "EXPOSURE_DURATION": 12.5,
        "DETECTOR_ERASE_COUNT": 3,
        "FLAT_FIELD_CORRECTION_FLAG": True,
        "INSTRUMENT_MODE_ID": "FULL_FRAME",
    },
    "IMAGE": {
        "LINES": 1024,
        "LINE_SAMPLES": 1024,
        "SAMPLE_BIT_MASK": "2#0000111111111111#",
        "OFFSET": -5,
    },
}


@pytest.fixture
def sample_label():
    return SAMPLE_LABEL


@pytest.fixture
def sample_tree():
    return SAMPLE_TREE


@pytest.fixture
def sample_label_file(tmp_path):
    path = tmp_path / "NRB_739187404EDR.LBL"
    path.write_bytes(SAMPLE_LABEL.encode("latin-1"))
    return path
