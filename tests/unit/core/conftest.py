"""Shared fixtures for core unit tests"""

import pytest


ORIGINAL = """\
function greet(name) {
  console.log("Hello, " + name);
  return true;
}"""

MODIFIED = """\
function greet(name, greeting = "Hello") {
  console.log(greeting + ", " + name + "!");
  return true;
}"""


@pytest.fixture(name="original")
def original_fixture():
    return ORIGINAL


@pytest.fixture(name="modified")
def modified_fixture():
    return MODIFIED
