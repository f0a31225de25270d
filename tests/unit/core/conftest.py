"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_ORG = """\
#+TITLE: Sample

* TODO [#B] Write the report :work:
  SCHEDULED: <2024-03-01 Fri 09:00>
  :PROPERTIES:
  :CUSTOM_ID: report
  :EFFORT: 2h
  :END:

Body of the first headline with *bold* text.
** DONE Review =draft= :work:review:
   CLOSED: [2024-02-28 Wed 17:30]
* Notes
"""


@pytest.fixture(name="sample_org")
def sample_org_fixture():
    return SAMPLE_ORG
