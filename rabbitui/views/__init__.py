"""Tab panes of the terminal interface: overview, exchanges and queues."""