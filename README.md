# pixelyard

Small games and demos built on pygame.

## Install

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Commands

| Command | What it does |
|---------|--------------|
| `pixelyard [--fullscreen]` | Sprite brawler. W/A/S/D moves the player. Hold the left mouse button to attack the nearest creature you face. The right mouse button puts the player in a defending state. H drains your own health. The game ends once the player's death animation has finished. |
| `pixelyard-snake` | Snake on a 30-pixel grid. Steer with W/A/S/D; the snake cannot reverse onto itself. Eating one of the five green apples makes it grow. Leaving the grid or running into your own tail ends the game. |
| `pixelyard-cube` | Colour-faced cube drawn with a software 3D projection. Hold A to turn it and make it larger. Hold D to turn it back and make it smaller. |
| `pixelyard-oval` | Draws a filled oval. |
| `pixelyard-music [PATH]` | Plays a music file, looping, and defaults to `music.mp3`. Space stops and restarts playback. The left and right arrows seek back and forward 10 seconds. |
| `pixelyard-text [TEXT] [--font FILE]` | Shows a line of text, by default `telhgxt`, stretched across the top of the window. The font defaults to `font.ttf`. |

Every command quits when you press Esc or close the window.

The brawler reads its files from the current directory. Sprites come from `assets/player.png`, `assets/sheep.png` and `assets/death.png`. The health-label font comes from `assets/fonts/Tiny5.ttf`. If an image is missing, a warning is logged and that sprite is not drawn. If the font is missing, the health bar is drawn without its label.

## Library use

The game logic can be driven without opening a window:

    from pixelyard.snake import Direction, SnakeGame

    game = SnakeGame()
    game.turn(Direction.DOWN)   # False if it would reverse the snake
    alive = game.update(0.5)    # False once the snake has crashed

Other building blocks:

- `pixelyard.animation.Animation(clock)`: steps through the frames of a sprite-sheet row. `clock` is any callable that returns milliseconds. It has the methods `show`, `show_once`, `show_reversed` and `reset`. `AnimationProperties`, `PlayerAnimations`, `EntityAnimations` and `FRect` describe the frames.
- `pixelyard.entities.Entity`, `nearest_entity` and `create_entities`: creatures that take damage within 100 pixels, plus a helper that picks the nearest living one.
- `pixelyard.player.Player` and `pixelyard.player_ui.PlayerUI`: the brawler's player and its health bar.
- `pixelyard.tools`: `load_texture`, `render_texture`, `render_texture_rect`, `create_text` and the `Flip` enum.
- `pixelyard.cube.rotation_matrix`, `project_cube` and `CubeView`: the cube's geometry and state.
- `pixelyard.oval.oval_points`, `oval_spans` and `draw_oval`: ellipse outlines and filled ellipses.
- `pixelyard.music.MusicPlayer(backend, path)`: play, pause and seek state over any backend. The backend must provide `load`, `play`, `halt`, `set_position` and `position`.
- `pixelyard.text.banner_height` and `create_text`: helpers for the text banner.

## What it does not do

- No images, fonts or music files are included. Supply them yourself at the paths above.
- In the brawler, creatures only idle and die. They do not move or attack. Defending only sets a flag and does not reduce damage. There is no score, level or restart.
- Snake has no score display and no game-over screen. The window simply closes when the snake crashes.