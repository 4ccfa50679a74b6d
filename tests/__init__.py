"""
Test suite for the top-down car game.

This package contains unit tests organized by component:
- test_car.py: Tests for car kinematics (speed, brakes, turning, position)
- test_controls.py: Tests for the key-to-control input state
- test_game_loop.py: Tests for the control/physics tick scheduling
- test_sprite.py: Tests for image loading and sprite rotation
"""
