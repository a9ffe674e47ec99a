import logging
from dataclasses import dataclass, field

from objectmeta import GameObject, ObjectMetadata, get_registry


@dataclass
class Spaceship(GameObject):
    """Object state shared by every ship created from the blueprint."""

    shield: int = 3
    weapons: list[str] = field(default_factory=list)


def declare_space_extension() -> ObjectMetadata:
    """Register the Spaceship type the way an extension would."""
    meta = (
        get_registry()
        .register(
            ObjectMetadata(
                "Space::",
                "Space::Ship",
                "Spaceship",
                "A ship with shields and weapons",
                "res/ship24.png",
                blueprint=Spaceship(type_name="Space::Ship", weapons=["laser"]),
            )
        )
        .set_help_path("/objects/spaceship")
        .add_include_file("space/ship.js")
    )

    meta.add_condition(
        "ShieldDown",
        "Shield down",
        "Check if the shield is depleted.",
        "Shield of _PARAM0_ is down",
        "Shield",
        "res/shield24.png",
        "res/shield.png",
    ).add_parameter("object", "Ship", "Space::Ship")

    meta.add_action(
        "Fire",
        "Fire",
        "Fire the current weapon.",
        "Make _PARAM0_ fire",
        "Weapons",
        "res/fire24.png",
        "res/fire.png",
    ).add_parameter("object", "Ship", "Space::Ship")

    meta.add_expression("Shield", "Shield", "Remaining shield", "Shield", "res/shield.png")
    meta.add_str_expression("Weapon", "Weapon", "Current weapon", "Weapons", "res/fire.png")
    return meta


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    meta = declare_space_extension()
    print(meta)
    for key, action in meta.actions.items():
        print(f"action {key}: {action.sentence} (help: {action.help_path})")

    player = get_registry().create_object("Space::Ship", "Player")
    wingman = get_registry().create_object("Space::Ship", "Wingman")
    player.weapons.append("missile")
    print(player.name, player.weapons)
    print(wingman.name, wingman.weapons)

    # Declared without blueprint: creation fails with a logged error.
    ghost = ObjectMetadata("Space::", "Space::Ghost", "Ghost", "", "", blueprint=None)
    print(ghost.create_object("Ghost1"))
