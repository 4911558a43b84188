import pytest

from shopfront.ratings import Rating, RatingBook


@pytest.fixture
def ratings_file(tmp_path):
    path = tmp_path / "ratings.txt"
    path.write_text("", encoding="utf-8")
    return path


def test_rating_round_trip():
    rating = Rating(4, "Maria", 4.5)
    assert Rating.from_line(rating.to_line() + "\n") == rating


def test_rating_line_format():
    assert Rating(4, "Maria", 4.5).to_line() == "4-Maria-4.5"


@pytest.mark.parametrize("value", [-1.0, 5.01])
def test_rating_out_of_range(value):
    with pytest.raises(ValueError):
        Rating(1, "Maria", value)


def test_from_line_out_of_range():
    with pytest.raises(ValueError):
        Rating.from_line("1-Maria-7")


def test_from_line_rejects_garbage():
    with pytest.raises(ValueError):
        Rating.from_line("1 Maria 3")


def test_average_without_ratings(ratings_file):
    assert RatingBook(ratings_file).average(1) == 0


def test_average(ratings_file):
    book = RatingBook(ratings_file)
    book.add_rating(1, "Maria", 4.0)
    book.add_rating(1, "Ivan", 2.0)
    book.add_rating(2, "Ivan", 5.0)
    assert book.average(1) == 3.0
    assert book.average(2) == 5.0


def test_rating_twice_is_refused(ratings_file, capsys):
    book = RatingBook(ratings_file)
    assert book.add_rating(1, "Maria", 4.0) is True
    assert book.add_rating(1, "Maria", 1.0) is False
    assert len(book) == 1
    assert book.average(1) == 4.0
    assert "You have already rated this product!" in capsys.readouterr().out


def test_add_invalid_rating(ratings_file):
    book = RatingBook(ratings_file)
    with pytest.raises(ValueError):
        book.add_rating(1, "Maria", 9.0)
    assert len(book) == 0


def test_remove_rating(ratings_file):
    book = RatingBook(ratings_file)
    book.add_rating(1, "Maria", 4.0)
    book.add_rating(1, "Ivan", 2.0)
    assert book.remove_rating(1, "Maria") is True
    assert book.remove_rating(1, "Maria") is False
    assert book.average(1) == 2.0


def test_save_and_reload(ratings_file):
    book = RatingBook(ratings_file)
    book.add_rating(1, "Maria", 4.0)
    book.add_rating(3, "Ivan", 2.5)
    book.save()
    reloaded = RatingBook(ratings_file)
    assert len(reloaded) == 2
    assert reloaded.average(3) == 2.5
    assert reloaded.remove_rating(1, "Maria") is True


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        RatingBook(tmp_path / "absent.txt")