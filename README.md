# satsim

Component models for a small satellite simulation. Each model is a plain
Python class that holds its own state. At each step you give it new inputs.
It returns derivatives or derived quantities, and you feed those to your own
integrator. Vectors and matrices are NumPy arrays.

## Models

- `satsim.gravity`
  - `GravitationalForce` gives the Newtonian attraction between two point
    masses. `calculate_force()` returns the magnitude. `force_at_mass1()` and
    `force_at_mass2()` return the force vector and the point it acts at.
  - Masses at the same position exert no force.
  - `unit_vector` normalises a 3-vector and gives the zero vector for a zero
    input.
- `satsim.celestial`
  - `CelestialBody` holds the mass, radius, position and velocity of a body.
  - `acceleration(force)` returns F / m.
- `satsim.battery`
  - `Battery` is a battery modelled as a circuit with two RC branches.
  - `voltage_derivatives()` returns the rates of change of the two branch
    voltages.
  - `update_soc(dt)` advances the state of charge and holds it between 0.2
    and 0.9. Reaching either limit sets the current to zero.
  - `update_vt()` returns the terminal voltage.
  - `find_ocv` gives the open-circuit voltage from the state of charge.
- `satsim.bus`
  - `Bus` shares an incoming current among up to ten `Node` loads, in node
    order.
  - `turn_node_on`, `turn_node_off` and `state_update` change the bus.
  - `node_current`, `node_power` and `node_voltage` read a single node.
- `satsim.solar_array`
  - `SolarArray` follows a diode IV curve.
  - Set `voltage`, then call `update_current()`. The current never goes below
    zero.
- `satsim.solar_cell`
  - `SolarCell` gives a short-circuit current that is proportional to the
    cosine between the light ray and the cell's normal.
  - `LockAxis` selects the axis that the normal is held perpendicular to.
  - `rotate_dir_clock` and `rotate_dir_contclock` turn the normal by a given
    number of degrees.
- `satsim.h_bridge`
  - `HBridge` sets the polarity of a supply voltage: forward, backwards or
    off.
- `satsim.control_wheel`
  - `ControlWheel` is a solid-cylinder reaction wheel.
  - It gives its inertia matrix, and its scalar inertia about a spin
    direction.
- `satsim.motor`
  - `Motor` is a DC motor that drives a `ControlWheel`.
  - `current_derivative()` and `angular_acceleration()` give the electrical and
    mechanical rates of change.
  - `torque()` and `torque_vector()` give the net torque.
  - `update_pos`, `update_ori` and `update_pos_ori` place the motor on a
    rotating body.
  - Out-of-order use within a cycle raises a `MotorWarning`.
- `satsim.attitude`
  - `AttitudeControlSystem` holds three motors that spin about the body's x,
    y and z axes.
  - `total_torque()` returns the sum of their torque vectors.
- `satsim.simulation`
  - `SimObject` is a fixed-step loop. It sleeps about one step between
    updates, so it runs in real time.
  - `SatelliteSim` is a small example built on it. A value starts at 100 and
    grows by 10 per second.

## Installing

```
pip install .
```

## Example

```python
from satsim.gravity import GravitationalForce

gf = GravitationalForce(5.0, 10.0)
gf.update_pos((1.0, 1.0, 1.0), (2.0, 2.0, 2.0))
magnitude = gf.calculate_force()
force, position = gf.force_at_mass1()
```

## Running the example simulation

```
satsim
satsim --timestep 0.01 --max-time 1
```

The command runs `SatelliteSim` with a 0.0025 s step for 2 seconds unless you
give other values. At every step it prints the value and the elapsed time. A
negative `--max-time` runs without end.

## What it does not do

- The package does not assemble the models into a whole-satellite
  simulation.
- It has no numerical integrator of its own. You integrate the derivatives
  yourself.
- It writes no output files. The `satsim` command runs only the
  `SatelliteSim` example.

## Tests

```
pip install .[test]
pytest
```