from ai_text_detector.tokenization import split_into_sentences, split_words, tokenize


def test_tokenize_splits_sentences_and_strips_punctuation():
    stream = tokenize("Hello, world! It's a well-known fact. Is it sunny today?")

    assert stream.sentences == (
        ("Hello", "world"),
        ("It's", "a", "well-known", "fact"),
        ("Is", "it", "sunny", "today"),
    )
    assert stream.sentence_lengths == [2, 4, 4]
    assert stream.word_count == 10


def test_decimal_numbers_do_not_end_sentences():
    sentences = split_into_sentences("The value is 3.14 today. Next sentence here!")

    assert sentences == ["The value is 3.14 today.", "Next sentence here!"]


def test_mark_followed_by_lowercase_is_not_a_boundary():
    sentences = split_into_sentences("Visit example.com for details. Thanks.")

    assert sentences == ["Visit example.com for details.", "Thanks."]


def test_known_abbreviations_are_tolerated():
    stream = tokenize("Mr. and Mrs. Dursley arrived. We use e.g. tools here.")

    assert stream.sentence_count == 2
    assert stream.sentences[0] == ("Mr", "and", "Mrs", "Dursley", "arrived")
    assert stream.sentences[1] == ("We", "use", "e", "g", "tools", "here")


def test_line_breaks_and_terminal_runs_split_sentences():
    sentences = split_into_sentences("First line without stop\nWait?! Really...\n\nEnd")

    assert sentences == ["First line without stop", "Wait?!", "Really...", "End"]


def test_degenerate_input_yields_empty_stream():
    for text in ("", "   ", "... !!! ???", "— 😅 —"):
        stream = tokenize(text)
        assert stream.is_empty()
        assert stream.word_count == 0
        assert stream.sentence_count == 0


def test_sentences_reconstruct_full_word_sequence():
    for text in (
        "Hello there. General Kenobi! You are a bold one, aren't you? Pi is 3.14.",
        "The cat sat down.Then the dog ran away!Nobody saw it happen.",
        "Read it (twice)\nthen stop?Fine.",
    ):
        stream = tokenize(text)

        assert stream.words == split_words(text)


def test_boundary_without_following_space_splits_words():
    stream = tokenize("The cat sat down.Then the dog ran away!Nobody saw it happen.")

    assert stream.sentences == (
        ("The", "cat", "sat", "down"),
        ("Then", "the", "dog", "ran", "away"),
        ("Nobody", "saw", "it", "happen"),
    )


def test_internal_punctuation_separates_words():
    assert split_words("Pick red and/or blue,green or 3.14 'quoted' don't well-known") == [
        "Pick",
        "red",
        "and",
        "or",
        "blue",
        "green",
        "or",
        "3",
        "14",
        "quoted",
        "don't",
        "well-known",
    ]


def test_unicode_words_are_preserved():
    stream = tokenize("Ça va très bien. Merci beaucoup, mon ami.")

    assert stream.sentences[0] == ("Ça", "va", "très", "bien")
    assert stream.lower_words[0] == "ça"


def test_em_dashes_separate_words():
    assert split_words("It fell—and then—rose again.") == [
        "It",
        "fell",
        "and",
        "then",
        "rose",
        "again",
    ]
