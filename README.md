# picroute

picroute routes photonic integrated circuits on a rectangular grid. Each net
joins two grid cells, and the router looks for paths with a low total loss.
It counts three kinds of loss:

- **propagation loss**: each step from one cell to a neighbouring cell
- **crossing loss**: each cell that the net shares with other nets
- **bending loss**: each 90° turn

Routing runs in two stages:

1. Every net is laid out as an L. The route runs along x first and then along y.
2. Each net is ripped up in turn and rerouted with an A* search. The new route
   replaces the old one only if its loss is lower.

The passes repeat until one full pass brings no improvement.

## Installation

```
pip install .
```

To also install pytest for the test suite:

```
pip install .[test]
```

## Input format

```
grid 20 20
propagation loss 1
crossing loss 10
bending loss 3
num net 2
0 1 1 15 12
1 3 14 18 2
```

Each net line gives the net id, then the source `x y`, then the target `x y`.
All values are unsigned integers. Tokens may be split across lines however you
like.

## Commands

### Route a circuit

```
picroute INPUT OUTPUT
```

This reads `INPUT`, routes it, and writes two files:

- `OUTPUT` holds one header line per net in the form `id segment_count`. After
  it comes one line per unit step in the form `x1 y1 x2 y2`.
- A gnuplot script sits next to `OUTPUT`. It has the same name with the suffix
  replaced by `.gp`. When gnuplot runs it, it draws the routes into a `.png`
  file with that same name, and each net gets a random colour.

Progress is logged to standard output. If the wrong number of arguments is
given, the command prints a usage line and exits with status 1. It also exits
with status 1 and an error message if any of these happens:

- the input is malformed
- a net lies outside the grid
- a file cannot be opened

### Generate a random test case

```
picroute-generate SIZE [PROPAGATION_LOSS] [CROSSING_LOSS] [BENDING_LOSS] [NUM_NET]
```

This writes a square circuit of side `SIZE` to `test/picSIZExSIZE.in`. The
`test` directory must already exist. Every generated net has two distinct
endpoints. The defaults are:

- propagation loss: 1
- crossing loss: 10
- bending loss: 3
- number of nets: `SIZE`

## Library use

```python
from picroute.parser import parse
from picroute.routing import route
from picroute.output import write_output, write_gnuplot

circuit = parse("design.in")
nets = route(circuit)
write_output(nets, "design.out")
write_gnuplot(nets, "design.out", circuit.grid_x, circuit.grid_y)
```

### `picroute.models`

- `Point(x, y)` is one grid cell.
- `Net(id, points)` is a routed net. `points` lists its cells in order.
- `NetSpec(id, x1, y1, x2, y2)` is a net that has not been routed yet.
- `Circuit` holds:
  - the grid size: `grid_x`, `grid_y`
  - the loss weights: `propagation_loss`, `crossing_loss`, `bending_loss`
  - the nets: `nets`, a list of `NetSpec`

### `picroute.parser`

- `parse(path)` reads a circuit description from a file.
- `parse_text(text)` reads one from a string.

Both raise `ParseError`, a subclass of `ValueError`, for unknown keywords or
values that are not unsigned integers.

### `picroute.routing`

- `route(circuit)` runs the whole flow and returns the list of routed `Net`s.
- `initial_routes(circuit)` returns the L-shaped nets and the occupancy grid.
  In the grid, `grid[x][y]` counts the nets that use cell `(x, y)`.
- `route_net(grid, spec, propagation_loss, crossing_loss, bending_loss)` finds
  an A* route for one `NetSpec` and returns `(Net, loss)`.
- `net_loss(net, grid, circuit)` gives the loss of a routed net whose own cells
  are counted in `grid`.
- `estimate(...)` is the bend-aware heuristic that the search uses.

`initial_routes`, `route` and `route_net` raise `ValueError` if a net endpoint
lies outside the grid.

### `picroute.output`

- `format_output(nets)` and `write_output(nets, filename)` produce the segment
  list.
- `format_gnuplot(nets, filename, grid_x, grid_y, rng)` builds the plot script.
  `write_gnuplot(nets, filename, grid_x, grid_y, rng)` writes it and returns its
  path. Pass a `random.Random` as `rng` to get reproducible colours.
- `format_circuit(circuit)` renders a `Circuit` in the input format.

### `picroute.generator`

- `generate_test(size, propagation_loss, crossing_loss, bending_loss, num_net, rng)`
  returns a random circuit description as a string.
- `write_test_file(...)` writes that description into a directory as
  `pic<size>x<size>.in`.

## What it does not do

- picroute does not check a finished routing against its input.
- picroute does not run gnuplot itself. It only writes the script, and you
  render the picture with gnuplot yourself.