from groupfun.judge import Picture, auto_judge, judge


def test_neutral_picture_is_ordinary():
    assert judge(Picture(neutral=0.5, porn=0.9)) == "普通哦"


def test_drawing_with_hentai():
    assert judge(Picture(drawings=0.5, neutral=0.1, hentai=0.5)) == "二次元 hentai"


def test_low_neutral_counts_as_drawing():
    assert judge(Picture(drawings=0.0, neutral=0.1, porn=0.6, sexy=0.6)) == "二次元 porn hso"


def test_borderline_neutral_is_real():
    assert judge(Picture(drawings=0.1, neutral=0.3)) == "三次元"


def test_auto_skips_neutral():
    assert auto_judge(Picture(neutral=0.5, porn=0.9)) is None


def test_auto_skips_without_flags():
    assert auto_judge(Picture(drawings=0.9, neutral=0.1)) is None


def test_auto_reports_flags():
    result = auto_judge(Picture(drawings=0.1, neutral=0.1, porn=0.5, sexy=0.5))
    assert result == "三次元 porn hso"


def test_auto_drawing_prefix():
    result = auto_judge(Picture(drawings=0.8, hentai=0.8))
    assert result == "二次元 hentai"