from __future__ import annotations

"""Sample students used to populate a fresh roster."""

from typing import List

from .config import EMAIL_DOMAIN
from .person import Person


def sample_persons() -> List[Person]:
    return [
        Person("Alex Yeoh", "A8743880E", "e1234567" + EMAIL_DOMAIN, "Business Analytics", "1", "group 1"),
        Person("Bernice Yu", "A9272757L", "e9999999" + EMAIL_DOMAIN, "Computer Science", "1", "group 1"),
        Person("Charlotte Oliveiro", "A9321028P", "e3456819" + EMAIL_DOMAIN, "Political Science", "1", "group 2"),
        Person("David Li", "A9103128E", "e0000001" + EMAIL_DOMAIN, "Business Administration", "1", "group 2"),
        Person("Irfan Ibrahim", "A2492021T", "e3456718" + EMAIL_DOMAIN, "Chemistry", "1", "group 3"),
        Person("Roy Balakrishnan", "A9262441K", "e5739264" + EMAIL_DOMAIN, "Mechanical Engineering", "1", "group 3"),
    ]
