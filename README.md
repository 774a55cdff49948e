# digsigctl

`digsigctl` runs on a digital signage system and lets it be managed remotely.
It serves a small HTTP API (built with Flask) that configures the kiosk
browser (Chromium), switches what the screen shows, takes screenshots,
reports system information, and runs maintenance commands such as beeping,
identifying or rebooting the machine.

It is meant for Linux systems in which the display is driven by systemd units
(`chromium.service`, `installation-instructions.service`,
`unconfigured-warning.service`) and services are controlled with
`sudo systemctl`.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install '.[test]'
pytest
```

## The server

```
digsigctl [--network NETWORK] [--port PORT]
```

- `--network` / `-n`: the IP network whose local address the server binds to.
  The default is `fd56:1dda:8794:cb90::/64`, so that the API is only reachable
  through the management VPN. The server exits with status 1 if the network
  cannot be parsed and with status 2 if no local address lies in it.
- `--port` / `-p`: the TCP port, by default `5000`.

On startup, in a background thread, the server reads the hostname from
`/etc/hostname` and asks the portal which URL this host should show. If no
preferences exist at `/home/digsig/.config/chromium/Default/Preferences`, the
template `/usr/share/digsigctl/Preferences` is copied there first. When the
portal URL is non-empty and differs from the first startup URL in the Chromium
preferences, Chromium is stopped, the new URL is written to the preferences,
Chromium is started again and made the exclusive display service. The outcome
is printed on standard error.

### Endpoints

| Method | Path             | Purpose                                                        |
|--------|------------------|----------------------------------------------------------------|
| POST   | `/configure`     | Set the URL Chromium shows: `{"url": "https://example.com/"}`  |
| GET    | `/screenshot`    | A PNG screenshot of the running browser                        |
| GET    | `/sysinfo`       | System information as JSON                                     |
| POST   | `/rpc`           | Run an RPC command (see below)                                 |
| GET    | `/verify-portal` | Whether the portal URL matches the Chromium startup page       |
| GET    | `/portal-url`    | The URL the portal holds for this host                         |

`/configure` and `/rpc` need a JSON content type; without it they answer 404.
A body that is not JSON gives 400, and JSON that is not a valid configuration
or command gives 422. `/configure` answers `Configuration applied.` as text, or
the text of the error that stopped it.

`/screenshot` starts `screenshot.service`, waits until it is no longer active
and returns `/tmp/screenshot.png`; on failure it answers 500 with the error as
text.

### RPC commands

The body of a `POST /rpc` request is one of:

```
"beep"
"identify"
"configFile"
"restartWebBrowser"
{"reboot": null}
{"reboot": 30}
{"operationMode": null}
{"operationMode": "chromium"}
```

Commands without a value may also be written as an object with a `null` value,
such as `{"beep": null}`.

- `beep` sounds the PC speaker through its Linux input device.
- `identify` beeps and shows the hostname with `xmessage` for 15 seconds.
- `configFile` returns the path of the Chromium preferences file in the home
  directory.
- `restartWebBrowser` restarts the Chromium service.
- `reboot` runs `systemctl reboot` in the background, after the given number
  of seconds if one is given.
- `operationMode` returns the current mode when `null`, or sets one of
  `chromium`, `installationInstructions`, `unconfiguredWarning` or
  `blackScreen`. Setting a mode stops and disables the other display services.

A successful command answers with status 200 and its result as JSON. A failed
one answers with status 400 and a JSON list of errors, each with `message`,
`details` and `exit_code`.

## Repairing the Chromium preferences

```
fix-chromium-preferences [FILENAME]
```

Repairs a Chromium `Preferences` file so that the browser starts cleanly: the
profile's `exit_type` is set to `Normal` and the `session_data_status` of
`sessions` to `3`. Without `FILENAME` the default preferences file in the
user's home directory is used.

Exit status:

- `0`: the file was repaired, or does not exist.
- `1`: no default preferences file could be determined.
- `2`: the file cannot be read or parsed.
- Otherwise the sum of `4` (sessions could not be updated), `8` (profile could
  not be updated) and `16` (the file could not be saved).

## Using it as a library

Editing a preferences file:

```python
from digsigctl.preferences import ChromiumPreferences

preferences = ChromiumPreferences.load("Preferences")
preferences.update_or_init_session("https://example.com/")
preferences.update_or_init_profile()
preferences.update_or_init_sessions()
preferences.save("Preferences")
```

Collecting system information:

```python
from digsigctl.sysinfo.system_information import SystemInformation

info = SystemInformation.collect().to_dict()
```

Parts that cannot be read (CPU info, kernel command line, memory, root mount,
sensors via `/usr/bin/sensors -j`, S.M.A.R.T. states via `sudo smartctl`) are
reported as `null`. The parsers behind them work on plain text as well:
`digsigctl.sysinfo.meminfo.meminfo_from_text`,
`digsigctl.sysinfo.cmdline.parse_cmdline`,
`digsigctl.sysinfo.cpuinfo.CpuInfo.from_text`,
`digsigctl.sysinfo.mount.parse_mounts`,
`digsigctl.sysinfo.smart.get_devices_from_text` and
`digsigctl.sysinfo.smart.check_device_from_text`.

Running an RPC command directly:

```python
from digsigctl.rpc import Command

status, body = Command.from_json({"operationMode": None}).run().to_response()
```

## Limitations

- Only Linux is supported in practice: service control, the hostname, the PC
  speaker, screenshots and most system information rely on systemd, `/proc`,
  `/etc/hostname` and Linux device files.
- The `users` list in the uptime section of the system information is always
  empty.
- The application version is read with `pacman`, so it is only reported on
  systems that use it.