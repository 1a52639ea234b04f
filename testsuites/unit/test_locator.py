import pytest

from webui_kit.framework.locator import By, Locator


@pytest.mark.parametrize(
    "locator, selector",
    [
        (By.id("username"), "id=username"),
        (By.css("form > button"), "css=form > button"),
        (By.xpath("//input[@type='password']"), "xpath=//input[@type='password']"),
        (By.name("email"), 'css=[name="email"]'),
        (By.text("Log in"), "text=Log in"),
        (By.link_text("Forgot password?"), 'css=a:text-is("Forgot password?")'),
        (By.tag_name("h1"), "css=h1"),
        (By.class_name("error-message"), "css=.error-message"),
        (By.test_id("login-button"), 'css=[data-testid="login-button"]'),
    ],
)
def test_selector(locator, selector):
    assert locator.selector == selector


def test_str_form():
    assert str(By.id("username")) == "id=username"
    assert str(By.test_id("submit")) == "test_id=submit"


def test_parse():
    assert Locator.parse("id=username") == By.id("username")
    assert Locator.parse("xpath=//a[@href='/x?a=b']") == By.xpath("//a[@href='/x?a=b']")
    assert Locator.parse("#username") == By.css("#username")
    assert Locator.parse("input[name=q]") == By.css("input[name=q]")


def test_locators_are_values():
    assert By.id("a") == Locator("id", "a")
    assert len({By.id("a"), By.id("a"), By.css("a")}) == 2


def test_invalid_locators():
    with pytest.raises(ValueError, match="Unknown locator strategy"):
        Locator("partial_text", "x")
    with pytest.raises(ValueError, match="empty"):
        By.id("")
