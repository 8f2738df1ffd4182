import pytest

from nativedialog.model import Filter, MessageType


def test_filter_keeps_extensions_in_order():
    f = Filter("Image", ["png", "jpg", "gif"])
    assert f.description == "Image"
    assert f.extensions == ("png", "jpg", "gif")


def test_filter_accepts_generator():
    f = Filter("Rust Source", (e for e in ["rs"]))
    assert f.extensions == ("rs",)


def test_filter_requires_extensions():
    with pytest.raises(ValueError):
        Filter("Nothing", [])


def test_filter_patterns():
    assert Filter("Image", ["png", "jpg"]).patterns == ("*.png", "*.jpg")


def test_filter_is_immutable_and_comparable():
    a = Filter("Image", ["png"])
    assert a == Filter("Image", ("png",))
    with pytest.raises(AttributeError):
        a.description = "Other"


@pytest.mark.parametrize(
    "typ, icon",
    [
        (MessageType.INFO, "dialog-information"),
        (MessageType.WARNING, "dialog-warning"),
        (MessageType.ERROR, "dialog-error"),
    ],
)
def test_icon_names(typ, icon):
    assert typ.icon_name == icon


def test_message_type_lookup_by_value():
    assert MessageType("warning") is MessageType.WARNING