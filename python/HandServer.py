import json
import socket


class HandServer:
    """
    Publishes per-frame hand state to a single TCP client as
    newline-terminated JSON documents. Never blocks the frame loop waiting
    for a client; a failed send drops the client and waits for the next one.
    """

    def __init__(self, host="127.0.0.1", port=5555):
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self.sock.bind((host, port))
        self.sock.listen(1)
        self.sock.setblocking(False)
        # port 0 binds an ephemeral port, report the real one
        self.addr = self.sock.getsockname()
        self.conn = None
        print(f"[NET] Publishing hand state on {self.addr[0]}:{self.addr[1]}")

    def update(self):
        """Accept a waiting client, if any. Returns True while one is connected."""
        if self.conn is None:
            try:
                conn, peer = self.sock.accept()
            except BlockingIOError:
                return False
            conn.setblocking(True)
            self.conn = conn
            print(f"[NET] Client connected: {peer}")
        return True

    def send_state(self, state, fps=None):
        if self.conn is None:
            return False
        line = json.dumps({"hand": state.to_dict(), "fps": fps}) + "\n"
        try:
            self.conn.sendall(line.encode("utf-8"))
        except OSError as e:
            print("[NET] Send failed, dropping client:", e)
            self._drop_client()
            return False
        return True

    def _drop_client(self):
        conn, self.conn = self.conn, None
        conn.close()

    def close(self):
        if self.conn is not None:
            self._drop_client()
        if self.sock is not None:
            self.sock.close()
            self.sock = None
