from blog_api.schemas.post import PostCreate, PostUpdate
from blog_api.validation import (
    AUTHOR_INVALID,
    CONTENT_REQUIRED,
    ID_REQUIRED,
    TITLE_REQUIRED,
    TITLE_TOO_LONG,
    validate_post_create,
    validate_post_update,
)


def _messages(violations):
    return {violation.field: violation.message for violation in violations}


def test_valid_create_has_no_violations():
    payload = PostCreate(id=1, title="Time Management", content="Plan your day.", author="James Milner")
    assert validate_post_create(payload) == []


def test_author_is_optional():
    assert validate_post_update(PostUpdate(title="Title", content="Body")) == []


def test_author_with_digits_is_rejected():
    payload = PostCreate(
        id=1,
        title="Writing for Impact: Crafting Compelling Stories",
        content="Learn the art of storytelling.",
        author="Elizabeth1498",
    )
    assert _messages(validate_post_create(payload)) == {"author": AUTHOR_INVALID}


def test_author_with_punctuation_is_rejected():
    payload = PostUpdate(title="Title", content="Body", author="O'Brien")
    assert _messages(validate_post_update(payload)) == {"author": AUTHOR_INVALID}


def test_empty_author_counts_as_absent():
    payload = PostUpdate(title="Title", content="Body", author="")
    assert payload.author is None
    assert validate_post_update(payload) == []


def test_title_length_limit():
    assert validate_post_update(PostUpdate(title="x" * 50, content="Body")) == []
    violations = validate_post_update(PostUpdate(title="x" * 51, content="Body"))
    assert _messages(violations) == {"title": TITLE_TOO_LONG}


def test_blank_title_is_required():
    violations = validate_post_update(PostUpdate(title="   ", content="Body"))
    assert _messages(violations) == {"title": TITLE_REQUIRED}


def test_all_violations_are_reported():
    violations = validate_post_create(PostCreate(author="Ashley123"))
    assert _messages(violations) == {
        "id": ID_REQUIRED,
        "title": TITLE_REQUIRED,
        "content": CONTENT_REQUIRED,
        "author": AUTHOR_INVALID,
    }


def test_update_does_not_require_id():
    violations = validate_post_update(PostUpdate(content=""))
    assert _messages(violations) == {"title": TITLE_REQUIRED, "content": CONTENT_REQUIRED}
