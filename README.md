# questkit

Game data models and gameplay logic for a role-playing game. It is a plain
library with no dependencies outside the standard library.

## What it covers

- **`questkit.helpers`**: `GameDataError` is raised for missing, malformed or
  out-of-range game data. It is a `ValueError`. The module also has the
  `Vector` dataclass, `json_to_vector` (which takes a JSON array of exactly
  three numbers), `asset_path`, and the asset directory constants
  (`PATH_MESH`, `PATH_FX`, `PATH_SOUND` and so on).
- **`questkit.item`**: `ItemType`, `WeaponType`, `ThumbnailType`,
  `WeaponInfo`, `ItemInfo`, `GameItem`, `TypeInventory` and `Inventory`.
  `Inventory` holds one `TypeInventory` per `ItemType`, and each has an
  `items` list. `load_item_infos(path)` reads the `ItemList` array of a JSON
  file.
- **`questkit.dialogue`**: `DialogueList`, `DialogueLine` (at most three
  responses), `DialogueResponse` and `DialogueEvent`. An event's type is a
  `DialogueEventType`: `END`, `JUMP`, `COMMIT_QUEST`, `COMPLETE_QUEST`,
  `OPEN_SHOP`, `GIVE_ITEM` or `SET_BOOKMARK`. Its `index` holds the argument
  for the types that take one.
- **`questkit.quest`**: `Quest`, `SubQuest` (with `ArrivalInfo`, `CollectInfo`
  or `ActionInfo`) and `QuestReward`. `load_quests(path)` reads the
  `QuestList` array of a JSON file. `QuestStatus.update_progress` advances a
  serial quest one sub-quest at a time. For a parallel quest it counts the
  completed sub-quests.
- **`questkit.enemy`**: `EnemyType`, `EnemyLabelInfo` and `EnemyInfo`.
  `load_label_infos(path)` reads `LabelList` and `load_enemy_infos(path)`
  reads `EnemyInfoList`.
- **`questkit.character`**: `CustomCharacter`, which has hit points.
  `take_damage` subtracts the damage and then calls `on_hurt`, or calls
  `on_dead` when the hit points reach zero or less.
- **`questkit.enemy_ai`**: `EnemyState`, `EnemyCharacter` and
  `EnemyController`.
- **`questkit.npc`**: `NpcCharacter`, which holds dialogue, shop items and
  reward items.

Every `from_string` raises `GameDataError` for an unknown name. Every
`from_json` and loader raises `GameDataError` when a field is missing or has
the wrong type.

## Example

```python
from questkit.item import GameItem, Inventory, ItemType, load_item_infos
from questkit.quest import load_quests
from questkit.dialogue import DialogueList

items = load_item_infos("Data/ItemInfo.json")
quests = load_quests("Data/Quest.json")

inventory = Inventory()
inventory.type_inventory(ItemType.WEAPON).items.append(GameItem(info_index=0, num=1))

dialogue = DialogueList.from_json({"Dialogues": [
    {"Speaker": "Guard", "Text": "Halt!", "Responses": [
        {"Text": "Goodbye.", "Events": [{"Type": "End"}]}
    ]}
]})
```

## Enemy awareness

```python
from questkit.enemy_ai import EnemyCharacter, EnemyController, EnemyState

enemy = EnemyCharacter(removal_listener=print, kill_listener=print)
controller = EnemyController(enemy)

controller.on_target_perception_update(is_player=True, sensed=True, target="player")
controller.tick(2.0)
assert controller.state is EnemyState.DETECTED
```

Creating an `EnemyController` puts the enemy in `PATROL`. When a player is
sensed, the enemy enters `CAUTION`, records the target and starts a
two-second timer. `tick(delta)` advances the timers. When the timer runs out
the enemy becomes `DETECTED`.

Losing the player while in `CAUTION` returns the enemy to `PATROL` and cancels
the timer. Losing the player while `DETECTED` starts a five-second timer that
clears the target and returns the enemy to `PATROL`. Sensing the player again
before then cancels that timer.

When the enemy takes damage and survives, the controller remembers the
current state in its `blackboard` and enters `HURT`. When the enemy dies,
`removal_listener` is called with its resource index and `kill_listener` is
called with the labels of its `enemy_info`. The enemy is then marked
`destroyed`. `update_state` sets `question_mark_visible` and
`exclamation_mark_visible` to match the state.

## NPCs

`NpcCharacter.load_from_json` reads a JSON object with these fields:

- `Dialogues`
- `ShopItems`, which holds `Cloth`, `Weapon` and `Item` lists
- `RewardItems`

`interact(player)` marks the NPC as interacting and calls
`dialogue_listener(player, npc)`. `uninteract(player)` ends the interaction
and calls `player.uninteract()`.

## What it does not do

The package only models data and state. It leaves these to the game that
uses it:

- It does not render anything, play sounds or load assets. Mesh, sound,
  thumbnail and effect entries are asset path strings.
- It does not spawn enemies or move them.
- It has no networking.
- It has no player character, and so no quest reporting or item pickup.
- It has no command-line program.