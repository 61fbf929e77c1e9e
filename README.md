# zoopark

A turn-based zoo management game played in the terminal, in Russian. You
have been made director of an alien zoo. Build enclosures, buy animals, hire
staff, keep everyone fed and healthy, and try to stay solvent for 30 days.

## Installing

```
pip install .
```

## Playing

```
zoopark [--seed N] [--money N]
```

- `--seed` seeds the random number generator, so a game can be replayed.
- `--money` sets the money you start with (10000 by default).

Type `start` to begin. A short introduction follows and asks for the zoo's
name, which you give with `name <название>`. Input ends with `quit` or at end
of file. Animals, enclosures and workers are referred to by the numbers the
list commands print, starting at 1.

| Command                                   | What it does                                          |
|-------------------------------------------|-------------------------------------------------------|
| `start`                                   | begin a new game                                      |
| `name <название>`                         | answer the introduction's question about the name     |
| `stats`                                   | day, money, food, popularity, counts and staff        |
| `animals`                                 | list your animals                                     |
| `buy <тип> <возраст> [имя]`               | buy an animal                                         |
| `heal <номер>`                            | have a free veterinarian treat a sick animal          |
| `sell <номер>`                            | sell an animal for half its price                     |
| `breed <номер> <номер>`                   | try to breed two animals                              |
| `enclosures [номер]`                      | list enclosures, or show the animals in one           |
| `build <климат> <вместимость> [название]` | build an enclosure                                    |
| `workers`                                 | list staff                                            |
| `hire <должность>`                        | hire a veterinarian (1), cleaner (2) or feeder (3)    |
| `fire <номер>`                            | dismiss a worker; the director cannot be dismissed    |
| `food <количество>`                       | buy food at 10 per unit                               |
| `advertise <бюджет>`                      | raise popularity by one point per 100 spent           |
| `next`                                    | end the day                                           |
| `log`                                     | show the event log (the last 100 messages)            |
| `clear`                                   | clear the event log                                   |
| `cheat [name <название> \| money <сумма>]` | show or change the zoo's name and money               |
| `quit`                                    | leave the game                                        |

Animal types: 1 cat, 2 penguin, 3 dog, 4 polar bear, 5 giraffe, 6 elephant.
Enclosure climates: 1 tropical, 2 temperate, 3 polar. Type `help` or
`help <command>` inside the shell for details.

## Rules in short

- An animal needs an enclosure of its climate with room left; herbivores
  and predators never share one.
- Each day animals age and may fall ill; animals over 30 may die of old age.
  Sickness spreads inside an enclosure, and where the sick outnumber the
  healthy, sick animals may die.
- Animals short of food lose happiness and, after three hungry days, may die.
  A feeder cuts the food eaten; cleaners clean dirty enclosures.
- Visitors are twice the popularity, and each pays per living animal.
  Popularity drops for every sick or dead animal, drifts at random and
  stays between 10 and 100.
- Wages and enclosure upkeep are taken from the money twice during each day.
- After each day the log announces bankruptcy if money is below zero, or
  success once day 30 is reached.

## Using it as a library

The simulation is `zoopark.zoo.Zoo`:

```python
import random
from zoopark.zoo import Zoo, ZooError

zoo = Zoo("Зоосфера", 10000, rng=random.Random(1))
zoo.build_enclosure("Вольер", 1, 3)     # temperate, room for three
cat = zoo.buy_animal("Мурка", 0, 2)     # type and climate numbers start at 0 here
zoo.next_day()
print(zoo.money, zoo.popularity, zoo.console.lines())
```

Failed actions raise `ZooError` and are also written to `zoo.console`
(a `zoopark.console.ConsoleLog`). `zoopark.report` turns a zoo into the text
lines and table rows the shell prints, and `zoopark.story.Storyline` holds the
introductory scenes. The shell itself is `zoopark.shell.ZooShell`, and
`zoopark.app.main` is the command's entry point.

## What it does not do

- There is no graphical interface: no windows, charts or pictures. The
  history of money, popularity, visitors and animal count is kept on the
  `Zoo` object but not drawn.
- Aquatic enclosures and fish appear in the shop's lists but cannot be built
  or bought.
- Games are not saved; a game lasts as long as the shell runs.

## Tests

```
pip install .[test]
pytest
```