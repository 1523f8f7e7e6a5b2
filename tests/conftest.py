import pytest

from roster_manager.config import EMAIL_DOMAIN
from roster_manager.model import Roster, RosterModel
from roster_manager.person import Person

VALID_NAME_AMY = "Amy Bee"
VALID_NAME_BOB = "Bob Choo"
VALID_STUDENT_ID_AMY = "A1111111A"
VALID_STUDENT_ID_BOB = "A2222222B"
VALID_NET_ID_AMY = "e1111111"
VALID_NET_ID_BOB = "e2222222"
VALID_EMAIL_AMY = VALID_NET_ID_AMY + EMAIL_DOMAIN
VALID_EMAIL_BOB = VALID_NET_ID_BOB + EMAIL_DOMAIN
VALID_MAJOR_AMY = "Computer Science"
VALID_MAJOR_BOB = "Mathematics"
VALID_YEAR_AMY = "2"
VALID_YEAR_BOB = "3"
VALID_GROUP_FRIEND = "group 1"
VALID_GROUP_HUSBAND = "group 2"

NAME_DESC_AMY = " n/" + VALID_NAME_AMY
NAME_DESC_BOB = " n/" + VALID_NAME_BOB
STUDENT_ID_DESC_AMY = " s/" + VALID_STUDENT_ID_AMY
STUDENT_ID_DESC_BOB = " s/" + VALID_STUDENT_ID_BOB
NET_ID_DESC_AMY = " e/" + VALID_NET_ID_AMY
NET_ID_DESC_BOB = " e/" + VALID_NET_ID_BOB
MAJOR_DESC_AMY = " m/" + VALID_MAJOR_AMY
MAJOR_DESC_BOB = " m/" + VALID_MAJOR_BOB
YEAR_DESC_AMY = " y/" + VALID_YEAR_AMY
YEAR_DESC_BOB = " y/" + VALID_YEAR_BOB
GROUP_DESC_FRIEND = " g/" + VALID_GROUP_FRIEND
GROUP_DESC_HUSBAND = " g/" + VALID_GROUP_HUSBAND
GROUP_EMPTY = " g/"

INVALID_NAME_DESC = " n/James&"
INVALID_STUDENT_ID_DESC = " s/911a"
INVALID_NET_ID_DESC = " e/bob!yahoo"
INVALID_MAJOR_DESC = " m/1234"
INVALID_YEAR_DESC = " y/9"
INVALID_GROUP_DESC = " g/hubby*"

ALICE = Person("Alice Pauline", "A0000001A", "e0000001" + EMAIL_DOMAIN, "Computer Science", "1", "group 1")
BENSON = Person("Benson Meier", "A0000002B", "e0000002" + EMAIL_DOMAIN, "Mathematics", "2", "group 1",
                "Prefers email")
CARL = Person("Carl Kurz", "A0000003C", "e0000003" + EMAIL_DOMAIN, "Physics", "3", "group 2")
DANIEL = Person("Daniel Meier", "A0000004D", "", "", "", "")
AMY = Person(VALID_NAME_AMY, VALID_STUDENT_ID_AMY, VALID_EMAIL_AMY, VALID_MAJOR_AMY, VALID_YEAR_AMY,
             VALID_GROUP_FRIEND)
BOB = Person(VALID_NAME_BOB, VALID_STUDENT_ID_BOB, VALID_EMAIL_BOB, VALID_MAJOR_BOB, VALID_YEAR_BOB,
             VALID_GROUP_HUSBAND)


def typical_persons():
    return [ALICE, BENSON, CARL, DANIEL]


@pytest.fixture
def roster():
    return Roster(typical_persons())


@pytest.fixture
def model():
    return RosterModel(Roster(typical_persons()))
