from tmplkit.errors import Error, ErrorKind


def test_str_with_detail_joins_description_and_detail():
    err = Error(ErrorKind.SYNTAX_ERROR, "unexpected character")
    assert str(err) == f"{ErrorKind.SYNTAX_ERROR.value}: unexpected character"


def test_str_without_detail_is_description():
    err = Error(ErrorKind.BAD_ESCAPE)
    assert str(err) == ErrorKind.BAD_ESCAPE.description


def test_empty_detail_is_treated_as_absent():
    err = Error(ErrorKind.NON_KEY, "")
    assert str(err) == ErrorKind.NON_KEY.value


def test_attributes_are_kept():
    err = Error(ErrorKind.INVALID_OPERATION, "unable to load template")
    assert err.kind is ErrorKind.INVALID_OPERATION
    assert err.detail == "unable to load template"


def test_not_found_mentions_name():
    err = Error.not_found("layout.html")
    assert err.kind is ErrorKind.TEMPLATE_NOT_FOUND
    assert "layout.html" in str(err)
    assert str(err).startswith(ErrorKind.TEMPLATE_NOT_FOUND.value)


def test_messages_without_detail_are_distinct_per_kind():
    messages = [str(Error(kind)) for kind in ErrorKind]
    assert len(messages) == len(set(messages))