# groupfun

Pastime logic for group chat bots. Every module works on plain Python values,
`random.Random` instances and SQLite files, so it can be wired into whatever
bot framework you use. The package has no runtime dependencies.

## Modules

- `groupfun.judge`: `Picture` holds classifier probabilities (`drawings`,
  `hentai`, `neutral`, `porn`, `sexy`). `judge(picture)` always returns a short
  verdict; `auto_judge(picture)` returns a verdict only when something was
  flagged, otherwise `None`.
- `groupfun.runcode`: `cut_too_long(text)` trims program output after 30 line
  breaks (`\r\n` counts once) or 1000 characters and appends an ellipsis.
- `groupfun.reborn`: `WeightedChooser` draws items in proportion to integer
  weights; `load_rates(path)` reads `[{"name": ..., "weight": ...}]` JSON and
  scales the weights to integers; `reborn(countries, rng)` rolls a new life,
  picking a country from the given chooser and a gender from `GENDERS`.
- `groupfun.score`: `ScoreStore` keeps the `score` and `sign_in` tables in
  SQLite (`score_of`, `set_score`, `sign_in_of`, `set_sign_in_count`,
  `top_scores`). `sign_in(store, uid, now, rng)` signs a user in once per day,
  raises `AlreadySignedIn` on a repeat and returns a `SignInResult` with the
  new level, rank, coins earned, whether the cap of 1200 was hit and the score
  of the next rank. `rank_of`, `next_rank_score` and `hour_greeting` are
  available on their own.
- `groupfun.kuji`: `kuji_text(conn, number)` reads a fortune slip's
  interpretation from a `kuji` table (raising `LookupError` if it is missing);
  `image_names(number)` gives the front and back image file names.
- `groupfun.sleep`: `SleepStore` records good nights (`sleep`) and good
  mornings (`get_up`), returning the member's place in tonight's or this
  morning's order and the time since their last entry. `split_duration`,
  `is_morning`, `is_evening`, `good_morning_text` and `good_night_text` build
  the replies.
- `groupfun.nativewife`: `group_folder` names a group's folder in base 36,
  `extract_name` takes the name after a command, `daily_pick` chooses the same
  picture for the same nickname and day, and `parse_permission` reads a
  grant/revoke command.
- `groupfun.tarot`: `TarotDeck.from_json` loads card and spread data;
  `draw(n, kind, rng)` draws up to 20 distinct cards (major arcana, or minor
  arcana when `kind` contains 小), `lookup(name)` finds a card,
  `card_list_text()` lists the names, and `spread(kind, name, rng)` lays out a
  named spread, raising `LookupError` for an unknown one. Each result is a
  `Draw` with `position`, `description`, `image_url`, `image_name` and `text`.
  `parse_draw_count` reads counts like `3张`.
- `groupfun.textdb`: `random_grammar_by_tag` and `random_grammar_by_keyword`
  return a random `Grammar` (or `None`), whose `describe()` formats it;
  `random_tiangou` returns a random diary line.

## Example

```python
import random
from datetime import datetime

from groupfun.judge import Picture, judge
from groupfun.score import AlreadySignedIn, ScoreStore, hour_greeting, sign_in
from groupfun.sleep import SleepStore, good_night_text

rng = random.Random()
now = datetime.now()

with ScoreStore("score.db") as store:
    try:
        result = sign_in(store, 42, now, rng)
        print(hour_greeting(now), result.level, result.rank, result.coins)
    except AlreadySignedIn as exc:
        print(exc)

with SleepStore("sleep.db") as sleep_store:
    position, awake = sleep_store.sleep(10001, 42, now)
    print(good_night_text(position, awake))

print(judge(Picture(drawings=0.8, hentai=0.5)))
```

## What the package does not do

- It does not connect to any chat service and has no command dispatcher:
  matching messages and sending replies is up to the bot that uses it.
- It makes no network requests. Classifier scores, card pictures, fortune-slip
  images and program output must be fetched by the caller.
- It draws no images; the texts it returns are meant to be sent as-is or
  rendered elsewhere.
- It ships no data: the tarot JSON, the rate file for `load_rates` and the
  fortune-slip, grammar and diary databases must be supplied.
- Coins earned by `sign_in` are only returned; no wallet is kept.

## Tests

```
pip install -e .[test]
pytest
```